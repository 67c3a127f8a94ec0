import os
from portfolio_cms import create_app

app = create_app(os.getenv("FLASK_CONFIG", "development"))

if __name__ == "__main__":
    app.run(port=int(os.getenv("PORT", 8000)))
