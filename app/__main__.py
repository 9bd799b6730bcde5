from dotenv import load_dotenv

load_dotenv()  # <-- carga .env desde el directorio actual

import uvicorn  # noqa: E402

from app.settings import get_settings  # noqa: E402


def main() -> None:
    settings = get_settings()
    print("Starting the server...")
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
