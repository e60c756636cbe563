#!/usr/bin/env python3
"""
Setup Verification Script

Validates configuration and connections before running the notifier.
Run this after setting up your .env file to ensure everything is configured correctly.

Usage:
    python scripts/verify_setup.py
    VERIFY_SMS_TO=+12145550100 python scripts/verify_setup.py   # also sends a test SMS
"""

import asyncio
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load environment variables
from dotenv import load_dotenv
load_dotenv()


def print_header(title: str) -> None:
    """Print section header."""
    print(f"\n{'='*60}")
    print(f" {title}")
    print(f"{'='*60}")


def print_result(name: str, success: bool, message: str = "") -> None:
    """Print check result."""
    status = "[PASS]" if success else "[FAIL]"
    color = "\033[92m" if success else "\033[91m"
    reset = "\033[0m"
    msg = f" - {message}" if message else ""
    print(f"  {color}{status}{reset} {name}{msg}")


def check_env_file() -> bool:
    """Check if .env file exists."""
    env_path = project_root / ".env"
    exists = env_path.exists()
    if not exists:
        print_result(".env file", False, "File not found, using process environment only")
    else:
        print_result(".env file", True, "Found")
    return exists


def check_dependencies() -> bool:
    """Check if required Python packages are installed."""
    required_packages = [
        "fastapi",
        "uvicorn",
        "pydantic",
        "pydantic_settings",
        "httpx",
    ]

    missing = []
    for package in required_packages:
        try:
            __import__(package)
        except ImportError:
            missing.append(package)

    if missing:
        print_result("Python packages", False, f"Missing: {', '.join(missing)}")
        return False
    print_result("Python packages", True, "All required packages installed")
    return True


def check_sms_settings() -> bool:
    """Check Infobip variables using the same rules as application boot."""
    from app.config import get_settings, validate_sms_settings

    settings = get_settings()
    problems = validate_sms_settings(settings)
    for problem in problems:
        print_result("Infobip", False, problem)

    if not problems:
        key = settings.infobip_api_key
        masked = f"{key[:8]}...{key[-4:]}" if len(key) > 12 else "***"
        print_result("INFOBIP_BASE_URL", True, settings.infobip_base_url)
        print_result("INFOBIP_API_KEY", True, f"Set ({masked})")
        print_result("INFOBIP_SENDER", True, settings.infobip_sender)

    return not problems


def check_optional_vars() -> None:
    """Check optional environment variables."""
    optional = [
        ("APP_ENV", "development"),
        ("DEBUG", "false"),
        ("PORT", "3000"),
        ("STAFF_STATUS_URL", "(not set, availability changes are only logged)"),
        ("ROSTER_FILE", "(built-in roster)"),
    ]

    for var, default in optional:
        value = os.getenv(var, default)
        print_result(var, True, f"{value}")

    if os.getenv("KIOSK_API_KEY"):
        print_result("KIOSK_API_KEY", True, "Set")
    else:
        print_result("KIOSK_API_KEY", False, "Not set - kiosk endpoints are unauthenticated")


def check_roster() -> bool:
    """Verify the roster loads and has staff to notify."""
    try:
        from app.core.roster import get_roster_store

        roster = get_roster_store().snapshot()
    except (OSError, ValueError, KeyError) as e:
        print_result("Roster", False, str(e)[:60])
        return False

    if len(roster) == 0:
        print_result("Roster", False, "No staff")
        return False

    missing_phone = [m.id for m in roster if not m.phone]
    print_result(
        "Roster",
        True,
        f"{len(roster)} staff, {len(roster.busy())} busy/unavailable",
    )
    if missing_phone:
        print_result("Staff phones", False, f"No phone for: {', '.join(missing_phone)}")
    return True


async def check_staff_status_api() -> bool:
    """Check if the kiosk staff-status API is reachable."""
    url = os.getenv("STAFF_STATUS_URL", "")
    if not url:
        print_result("Staff status API", False, "Skipped - STAFF_STATUS_URL not set")
        return False

    try:
        import httpx

        async with httpx.AsyncClient(timeout=5.0) as client:
            response = await client.get(url)
        print_result("Staff status API", True, f"Reachable at {url} ({response.status_code})")
        return True

    except httpx.HTTPError:
        print_result("Staff status API", False, f"Not reachable at {url}")
        return False


async def send_test_sms(to: str) -> bool:
    """Send one real SMS through Infobip."""
    from app.core.notifications import templates
    from app.core.roster import normalize_phone
    from app.infra.sms import InfobipClient, SmsSendError

    client = InfobipClient()
    try:
        await client.send(normalize_phone(to), templates.sample_message())
        print_result("Test SMS", True, f"Accepted for {to}")
        return True
    except SmsSendError as e:
        print_result("Test SMS", False, f"{e} {e.body[:60]}")
        return False
    finally:
        await client.close()


async def main():
    """Run all verification checks."""
    print("\n" + "="*60)
    print(" Elite Kutz Notifier - Setup Verification")
    print("="*60)

    critical_failed = False

    print_header("Environment File")
    check_env_file()

    print_header("Python Dependencies")
    if not check_dependencies():
        print_header("Summary")
        print("\n  \033[91mCRITICAL: Install the project first: pip install -e .\033[0m\n")
        return 1

    print_header("Infobip Settings")
    sms_ok = check_sms_settings()
    if not sms_ok:
        critical_failed = True

    print_header("Optional Environment Variables")
    check_optional_vars()

    print_header("Roster")
    if not check_roster():
        critical_failed = True

    print_header("Service Connections")
    await check_staff_status_api()  # Non-critical

    test_to = os.getenv("VERIFY_SMS_TO", "")
    if test_to and sms_ok:
        if not await send_test_sms(test_to):
            critical_failed = True
    else:
        print_result("Test SMS", False, "Skipped - set VERIFY_SMS_TO to send one")

    print_header("Summary")

    if critical_failed:
        print("\n  \033[91mCRITICAL: Some required checks failed.\033[0m")
        print("  Please fix the issues above before running the notifier.")
        print()
        return 1

    print("\n  \033[92mAll required checks passed!\033[0m")
    print("  You can start the notifier with:")
    print("    uvicorn app.main:app --port 3000 --reload")
    print()
    return 0


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
