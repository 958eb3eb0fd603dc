"""Local/Vercel entrypoint.

Exposes an `app` object next to the `lotto_analyzer/` package so Flask
hosting detection finds it.
"""

from lotto_analyzer import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8000, debug=False)
