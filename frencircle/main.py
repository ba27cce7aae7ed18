"""Run the frencircle API with uvicorn (`frencircle` console script)."""
import logging

import uvicorn

from frencircle.config import API_HOST, API_PORT, API_RELOAD, SUPABASE_URL

logger = logging.getLogger("frencircle")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
    logger.info(
        "Serving friends on %s:%d (store %s, reload=%s)",
        API_HOST, API_PORT, SUPABASE_URL or "unset", API_RELOAD,
    )
    uvicorn.run(
        "frencircle.api.app:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_RELOAD,
    )


if __name__ == "__main__":
    main()
