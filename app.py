from src.attendance_sheets.attendance_sheets.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"], use_reloader=False)
