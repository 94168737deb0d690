"""
Local development server for the weather widget.
Run this from the root directory: python -m weather_widget.local_dev
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

root_dir = Path(__file__).parent.parent


def main():
    # Load environment variables from .env before the app reads its config
    env_file = root_dir / ".env"
    if env_file.exists():
        load_dotenv(env_file)
        print(f"Loaded environment variables from {env_file}")
    else:
        print("No .env file found. Using .env.example as reference.")

    print("Starting Weather Widget...")
    print("Open http://localhost:8000/")

    uvicorn.run(
        "weather_widget.lambda_function:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()
