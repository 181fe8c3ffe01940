"""WSGI entry point: `flask --app app run` or `python app.py`."""

from src.attendance_cloud.attendance_cloud.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config.get("DEBUG", False))
