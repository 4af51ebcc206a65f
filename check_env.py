#!/usr/bin/env python3
"""Helper script to check and create the .env file for the Gemini advisor."""

import os
import sys
from pathlib import Path

TEMPLATE = """# Gemini advisor (optional - the advisor answers with a fixed message when unset)
# Get a key from: https://aistudio.google.com/app/apikey
DSD_GEMINI_API_KEY=
# DSD_GEMINI_MODEL=gemini-2.5-flash

# API Configuration
DSD_API_PREFIX=/api
DSD_PUBLIC_BASE_URL=http://localhost:5173/
# DSD_FRONTEND_ALLOWED_ORIGINS - comma-separated: http://localhost:5173,http://127.0.0.1:5173

# Data
# DSD_SCHOOLS_FILE=./src/app/data/schools.json
"""


def _mask(value: str) -> str:
    if len(value) > 12:
        return value[:6] + "..." + value[-4:]
    return "***"


def main():
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("Dhofar Schools Directory environment checker")
    print("=" * 60)
    print()

    if not env_file.exists():
        env_file.write_text(TEMPLATE, encoding="utf-8")
        print(f"✅ Created template .env file at: {env_file}")
        print("⚠️  Add DSD_GEMINI_API_KEY to enable the advisor.")
        return

    print(f"✅ Found .env file at: {env_file}")
    for line in env_file.read_text(encoding="utf-8").splitlines():
        name, sep, value = line.partition("=")
        if sep and name.strip() == "DSD_GEMINI_API_KEY" and value.strip():
            print(f"{name}={_mask(value.strip())}")
        else:
            print(line)
    print()

    sys.path.insert(0, str(project_root / "src"))
    from app.config import settings

    env_key = os.getenv("DSD_GEMINI_API_KEY")
    print(f"{'✅' if env_key else '❌'} DSD_GEMINI_API_KEY in process environment")
    print(f"Schools file: {settings.schools_file} ({'found' if settings.schools_file.exists() else 'missing'})")

    if settings.gemini_api_key:
        print(f"✅ Advisor configured with model {settings.gemini_model}")
    else:
        print("❌ Advisor NOT configured; answers will fall back to the unavailable message")


if __name__ == "__main__":
    main()
