#!/usr/bin/env python3
"""
Test runner for PokeFinder.

Runs all tests in the tests directory for easy validation.
"""

import sys
import subprocess
import os
from pathlib import Path


def run_test_file(test_file: str) -> bool:
    """Run a specific test file."""
    try:
        # Set PYTHONPATH to include the project root
        env = os.environ.copy()
        env['PYTHONPATH'] = str(Path(__file__).parent)

        result = subprocess.run([sys.executable, test_file],
                                capture_output=True, text=True,
                                cwd=Path.cwd(), env=env)

        if result.returncode == 0:
            print(f"✅ {test_file} - PASSED")
            return True
        else:
            print(f"❌ {test_file} - FAILED")
            if result.stdout:
                print("STDOUT:", result.stdout)
            if result.stderr:
                print("STDERR:", result.stderr)
            return False

    except OSError as e:
        print(f"❌ {test_file} - ERROR: {e}")
        return False


def main() -> int:
    """Run all tests."""
    print("🧪 PokeFinder - Test Suite")
    print("=" * 50)

    tests = [
        "tests/test_models.py",
        "tests/test_api_client.py",
        "tests/test_lookup.py",
    ]

    results = []
    for test in tests:
        test_path = Path(test)
        if test_path.exists():
            success = run_test_file(str(test_path))
            results.append(success)
        else:
            print(f"⚠️  {test} - FILE NOT FOUND")
            results.append(False)

    print("\n" + "=" * 50)

    passed = sum(results)
    total = len(results)

    if passed == total:
        print(f"🎉 All tests passed! ({passed}/{total})")
        return 0
    else:
        print(f"❌ Some tests failed: {passed}/{total} passed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
