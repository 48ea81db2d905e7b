"""Application entrypoint.

Local run:  python main.py
Gunicorn:   gunicorn -w 2 -b 0.0.0.0:8000 main:app
"""

from lotto_reward import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8000, debug=False)
