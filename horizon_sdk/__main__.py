"""Run the Horizon CLI with ``python -m horizon_sdk``."""

from dotenv import find_dotenv, load_dotenv

# HORIZON_URL may come from a .env in the working directory
load_dotenv(find_dotenv(usecwd=True))

from .cli import main  # noqa: E402

if __name__ == "__main__":
    main()
