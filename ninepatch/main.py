"""Точка входа в приложение предпросмотра."""
import logging

from ninepatch.config import settings


def main() -> None:
    """Настраивает логирование, создаёт и запускает главное окно."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # UI импортируется лениво: ядро и тесты не требуют дисплея
    from ninepatch.app import NinePatchPreviewApp

    app = NinePatchPreviewApp()
    app.mainloop()


if __name__ == "__main__":
    main()
