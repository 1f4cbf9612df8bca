import logging

import uvicorn

from mealplan.api.api_run import app
from mealplan.utilities.config import APP_HOST, APP_PORT, LOG_FORMAT, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
