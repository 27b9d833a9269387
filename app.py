import logging
import sys

from config import Config
from faststats import create_app

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)

app = create_app()


if __name__ == '__main__':
    logger.info("Starting on %s", Config.PORT)
    app.run(host='0.0.0.0', port=Config.PORT, debug=Config.DEBUG)
