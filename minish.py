# minish.py
import sys

from minish_core.cli import run

# --- .env loader (preferred) ---
from pathlib import Path
from dotenv import load_dotenv
# project root is where minish.py lives
env_path = Path(__file__).resolve().parent / ".env"
load_dotenv(env_path, override=False)
# --------------------------------

def main() -> None:
    sys.exit(run())

if __name__ == "__main__":
    main()
