"""
Interactive helper that stores the AI provider keys in the settings env file.

Without HUGGINGFACE_API_KEY the BioGPT endpoints run in limited mode; without
OPENAI_API_KEY image analysis answers 503.
"""
import os
from getpass import getpass
from pathlib import Path

from dotenv import set_key

repo_dir = Path(__file__).resolve().parent.parent
# settings also read this file from the repository root, whatever the working
# directory; importing them here would require DATABASE_URL
env_file = f".env.{os.getenv('APP_ENV', 'development')}"

PROVIDERS = [
    (
        "HUGGINGFACE_API_KEY",
        "Hugging Face (BioGPT)",
        "https://huggingface.co/settings/tokens",
        "BioGPT service will run in limited mode.",
    ),
    (
        "OPENAI_API_KEY",
        "OpenAI (image analysis)",
        "https://platform.openai.com/api-keys",
        "Image analysis will be unavailable.",
    ),
]


def main() -> None:
    env_path = repo_dir / env_file
    env_path.touch(exist_ok=True)

    print("\n===== API Key Setup =====\n")
    print(f"Keys are written to {env_path}\n")

    saved = 0
    for variable, label, url, without_key in PROVIDERS:
        print(f"{label}: create a key at {url}")
        api_key = getpass(f"Enter {variable} (leave empty to skip): ").strip()
        if not api_key:
            print(f"No key provided. {without_key}\n")
            continue
        set_key(str(env_path), variable, api_key)
        saved += 1
        print(f"{variable} saved.\n")

    if saved:
        print("Please restart the server for changes to take effect.\n")


if __name__ == "__main__":
    main()
