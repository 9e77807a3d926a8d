import os

from .main import create_app


def main() -> None:
    app = create_app()
    app.run(
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
        debug=bool(app.config.get("DEBUG", False)),
    )


if __name__ == "__main__":
    main()
