"""Development entry point: ``python app.py`` from the repository root."""

from src.employee_directory.employee_directory.main import create_app

app = create_app()

if __name__ == "__main__":
    # one worker thread: the store is a single-writer, in-process object
    app.run(threaded=False)
