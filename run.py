import argparse
import logging
import os
import secrets

import uvicorn
from dotenv import load_dotenv

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def create_env_file():
    """
    Create .env from .env.sample if it does not exist yet
    """
    if not os.path.exists(".env"):
        logger.info("Creating .env from .env.sample...")

        if os.path.exists(".env.sample"):
            with open(".env.sample", "r") as sample_file:
                env_content = sample_file.read()

            env_content = env_content.replace("your_secret_key_here", secrets.token_urlsafe(32))
            env_content = env_content.replace("your_admin_password_here", secrets.token_urlsafe(16))

            with open(".env", "w") as env_file:
                env_file.write(env_content)

            logger.info("Created .env with a generated admin password. Read it from .env to sign in as admin.")
        else:
            logger.warning(".env.sample not found. Create .env manually.")


def main():
    parser = argparse.ArgumentParser(description="Run the SkillSwap service")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind the server to")
    parser.add_argument("--reload", action="store_true", help="Reload when code changes")
    parser.add_argument("--seed-demo", action="store_true", help="Load the demo users and skills on startup")

    args = parser.parse_args()

    create_env_file()

    # settings are read at import time, so the environment must be ready first
    load_dotenv(dotenv_path=".env", override=True)
    if args.seed_demo:
        os.environ["SEED_DEMO_DATA"] = "true"

    logger.info(f"Running SkillSwap at http://{args.host}:{args.port}")
    logger.info(f"Swagger UI: http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "skillswap.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload
    )


if __name__ == "__main__":
    main()
