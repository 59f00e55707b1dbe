"""
Careers Acceptance Suite
CLI entry point for running the behave feature files.
"""

import argparse
import glob
import os
import subprocess
import sys
from concurrent.futures import ThreadPoolExecutor

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import httpx

from config.settings import settings
from tools.file_handler import apply_profile, load_profiles


def discover_features(paths: list[str]) -> list[str]:
    """Expand directories into the .feature files they contain."""
    features = []
    for path in paths:
        if os.path.isdir(path):
            features.extend(sorted(glob.glob(os.path.join(path, "*.feature"))))
        elif os.path.exists(path):
            features.append(path)
    return features


def build_behave_command(feature_path: str, args) -> list[str]:
    """Build the behave command line for one feature file."""
    name = os.path.splitext(os.path.basename(feature_path))[0]
    report_path = os.path.join(settings.output_dir, f"{name}.json")

    cmd = [
        sys.executable, "-m", "behave", feature_path,
        "--format", "json.pretty", "--outfile", report_path,
        "--format", "pretty",
        "-D", f"output_dir={settings.output_dir}",
        "-D", f"headless={'true' if settings.headless else 'false'}",
    ]
    if settings.profile:
        cmd += ["-D", f"profile={settings.profile}"]
    if args.tags:
        cmd += ["--tags", args.tags]
    return cmd


def run_feature(feature_path: str, args) -> int:
    """Run one feature file in its own behave process and return its exit code."""
    print(f"[Runner] ▶️  {feature_path}")
    completed = subprocess.run(build_behave_command(feature_path, args))
    status = "✅ passed" if completed.returncode == 0 else f"❌ failed (exit {completed.returncode})"
    print(f"[Runner] {feature_path}: {status}")
    return completed.returncode


def check_site_reachable(url: str, timeout: int) -> bool:
    """Preflight: make sure the site under test answers before starting browsers."""
    print(f"🔌 Checking {url}...", end=" ")
    try:
        resp = httpx.get(url, timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as e:
        print(f"❌ Cannot reach {url}")
        print(f"   Error: {e}")
        return False

    if resp.status_code < 400:
        print(f"✅ HTTP {resp.status_code}")
    else:
        # Some sites answer bots with 403 but still render in a real browser
        print(f"⚠️  Server responded with HTTP {resp.status_code}, continuing")
    return True


def main():
    """Main entry point for the acceptance suite."""
    parser = argparse.ArgumentParser(
        description="Careers Acceptance Suite — browser checks for the careers search flow",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py
  python run.py --profile ci
  python run.py --headless --workers 2
  python run.py features/careers_search.feature --tags @smoke
        """,
    )

    parser.add_argument(
        "features",
        nargs="*",
        default=["features"],
        help="Feature files or directories (default: features)",
    )
    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Named profile from config/profiles.yaml (e.g. ci)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run the browser without a window",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of feature files to run in parallel (default: 1)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help=f"Output directory for reports and logs (default: {settings.output_dir})",
    )
    parser.add_argument(
        "--tags",
        type=str,
        default=None,
        help="behave tag expression to filter scenarios",
    )
    parser.add_argument(
        "--skip-preflight",
        action="store_true",
        help="Do not check that the site is reachable before running",
    )

    args = parser.parse_args()

    # Update settings
    profile = args.profile or settings.profile
    if profile:
        try:
            apply_profile(settings, profile, load_profiles(settings.profiles_path))
        except KeyError as e:
            print(f"❌ {e.args[0]}")
            sys.exit(1)
    if args.headless:
        settings.headless = True
    if args.output_dir:
        settings.output_dir = args.output_dir

    features = discover_features(args.features)
    if not features:
        print(f"❌ No feature files found in: {', '.join(args.features)}")
        sys.exit(1)

    os.makedirs(settings.output_dir, exist_ok=True)

    print("=" * 60)
    print("  🧪 Careers Acceptance Suite")
    print("=" * 60)
    print(f"  Site:     {settings.base_url}")
    print(f"  Browser:  {settings.browser} ({'headless' if settings.headless else 'headed'})")
    print(f"  Profile:  {settings.profile or 'default'}")
    print(f"  Features: {len(features)} file(s), {args.workers} worker(s)")
    print(f"  Output:   {settings.output_dir}/")
    print("=" * 60)
    print()

    if not args.skip_preflight and not check_site_reachable(settings.base_url, settings.request_timeout):
        sys.exit(1)
    print()

    try:
        if args.workers > 1 and len(features) > 1:
            with ThreadPoolExecutor(max_workers=args.workers) as pool:
                exit_codes = list(pool.map(lambda f: run_feature(f, args), features))
        else:
            exit_codes = [run_feature(f, args) for f in features]
    except KeyboardInterrupt:
        print("\n\n⛔ Run interrupted by user.")
        sys.exit(1)

    failed = sum(1 for code in exit_codes if code != 0)
    print(f"\n{'✅' if not failed else '❌'} Done! {len(features) - failed}/{len(features)} feature file(s) passed.")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
