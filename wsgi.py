"""WSGI entry point: gunicorn wsgi:app, or flask --app wsgi run --port 5000 --debug"""

from savings_bot.app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(port=5000, debug=True)
