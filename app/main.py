# app/main.py  (entrypoint)
from dotenv import load_dotenv

# load the root .env before settings / DATABASE_URL are read
load_dotenv()

from app.backend.main import app as app  # noqa: E402
from app.core.config import settings  # noqa: E402


def run() -> None:
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
