from .main import create_app


def main() -> None:
    app = create_app()
    app.run(debug=bool(app.config.get("DEBUG", False)))


if __name__ == "__main__":
    main()
