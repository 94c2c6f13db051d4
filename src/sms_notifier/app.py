import atexit
import logging

from flask import Flask

from sms_notifier.config import NotifierConfig, SmscConfig
from sms_notifier.log import setup_logging
from sms_notifier.notifier import BuildNotifier
from sms_notifier.providers.base import SmsProvider
from sms_notifier.routes import bp

logger = logging.getLogger(__name__)


def create_app(
    provider: SmsProvider,
    config: NotifierConfig | None = None,
    smsc_config: SmscConfig | None = None,
) -> Flask:
    """Flask application factory.

    Args:
        provider: SMS provider instance (real or mock for tests).
        config: Notifier settings; read from the environment when omitted.
        smsc_config: Gateway settings; read from the environment when omitted.
    """
    config = config or NotifierConfig()
    setup_logging(config.log_level)

    app = Flask(__name__)
    app.extensions["build_notifier"] = BuildNotifier(
        provider,
        max_length=config.max_length,
        template=config.message_template,
    )
    app.extensions["smsc_config"] = smsc_config or SmscConfig()

    app.register_blueprint(bp)

    atexit.register(provider.close)

    logger.info("SMS notifier initialized")
    return app
