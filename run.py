import logging
from dotenv import load_dotenv

# Load environment variables before the config module reads them
load_dotenv()

from app import create_app
from app.config import HOST, PORT, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

if __name__ == "__main__":
    print("starting...")
    app = create_app()
    app.run(host=HOST, port=PORT, threaded=True)
    print("stopping...")
