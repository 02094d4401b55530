import logging
import os
import sys

import uvicorn

if __name__ == "__main__":
    # Ensure we are running from the correct directory
    sys.path.append(os.path.dirname(os.path.abspath(__file__)))
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run("playlist_grid.main:app", host="127.0.0.1", port=8000, reload=True)
