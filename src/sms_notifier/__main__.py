"""Dev entry point: python -m sms_notifier."""
from sms_notifier.app import create_app
from sms_notifier.config import NotifierConfig
from sms_notifier.providers import create_default_provider


def main() -> None:
    config = NotifierConfig()
    app = create_app(create_default_provider(), config)
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
