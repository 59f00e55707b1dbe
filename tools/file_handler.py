"""
File Handler Tool — loads run profiles, saves run results to JSON, and
builds the end-of-run text summary.
"""

import json
import os
from dataclasses import fields
from datetime import datetime

import yaml

from config.settings import Settings
from models.state import ScenarioResult


def load_profiles(yaml_path: str) -> dict[str, dict]:
    """
    Load named run profiles from a YAML file.

    Args:
        yaml_path: Path to profiles.yaml.

    Returns:
        Mapping of profile name to settings overrides. Unknown setting keys
        are dropped; profiles that are not mappings are skipped.
    """
    if not os.path.exists(yaml_path):
        return {}

    with open(yaml_path, "r") as f:
        data = yaml.safe_load(f) or {}

    known = {f.name for f in fields(Settings)}
    profiles = {}
    for name, overrides in (data.get("profiles") or {}).items():
        if not isinstance(overrides, dict):
            continue
        profiles[name] = {k: v for k, v in overrides.items() if k in known}

    return profiles


def apply_profile(settings: Settings, profile_name: str, profiles: dict[str, dict]) -> Settings:
    """
    Apply a profile's overrides to settings in place.

    Raises:
        KeyError: If the profile is not defined.
    """
    if profile_name not in profiles:
        available = ", ".join(sorted(profiles)) or "none"
        raise KeyError(f"Unknown profile '{profile_name}' (available: {available})")

    for key, value in profiles[profile_name].items():
        setattr(settings, key, value)
    settings.profile = profile_name
    return settings


def save_to_json(results: list[ScenarioResult], output_dir: str, filename: str = None) -> str:
    """
    Save scenario results to a JSON file.

    Args:
        results: Scenario results to save.
        output_dir: Directory to save the file in.
        filename: Optional filename (auto-generated with timestamp if not provided).

    Returns:
        Path to the saved file.
    """
    os.makedirs(output_dir, exist_ok=True)

    if not filename:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"run_summary_{timestamp}.json"

    filepath = os.path.join(output_dir, filename)

    with open(filepath, "w") as f:
        json.dump([r.model_dump(mode="json") for r in results], f, indent=2, default=str)

    return filepath


def generate_summary(results: list[ScenarioResult]) -> str:
    """
    Generate a human-readable summary of a test run.

    Args:
        results: Scenario results.

    Returns:
        Formatted summary string.
    """
    if not results:
        return "No scenarios were run."

    statuses = {}
    for result in results:
        statuses[result.status] = statuses.get(result.status, 0) + 1

    lines = [
        f"{'=' * 50}",
        f"  TEST RUN SUMMARY",
        f"{'=' * 50}",
        f"  Scenarios run: {len(results)}",
        f"",
        f"  By Status:",
    ]
    for status, count in sorted(statuses.items(), key=lambda x: -x[1]):
        lines.append(f"    - {status}: {count}")

    failed = [r for r in results if not r.passed]
    if failed:
        lines.append(f"")
        lines.append(f"  Not passed:")
        for result in failed:
            lines.append(f"    - {result.name} ({result.status})")
            if result.error:
                lines.append(f"      {result.error.splitlines()[0]}")

    lines.append(f"{'=' * 50}")

    return "\n".join(lines)
