from __future__ import annotations

import importlib.metadata
import json
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

DISTRIBUTION = "hecto"
FALLBACK_VERSION = "0.1.0"


class BuildInfo(NamedTuple):
    commit: Optional[str]
    dirty: bool


def get_version() -> str:
    """Release version of the installed distribution."""
    try:
        return importlib.metadata.version(DISTRIBUTION)
    except importlib.metadata.PackageNotFoundError:
        return FALLBACK_VERSION


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def _from_git_repo() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    root = _run_git(["rev-parse", "--show-toplevel"], cwd=here)
    if not root:
        return None
    commit = _run_git(["rev-parse", "HEAD"], cwd=Path(root))
    status = _run_git(["status", "--porcelain"], cwd=Path(root))
    return BuildInfo(commit=commit, dirty=bool(status))


def _from_direct_url() -> Optional[BuildInfo]:
    # PEP 610 direct_url.json records the commit of VCS installs
    try:
        dist = importlib.metadata.distribution(DISTRIBUTION)
        text = dist.read_text("direct_url.json")
    except importlib.metadata.PackageNotFoundError:
        return None
    if not text:
        return None
    try:
        commit = (json.loads(text).get("vcs_info") or {}).get("commit_id")
    except (ValueError, AttributeError):
        return None
    return BuildInfo(commit=commit, dirty=False) if commit else None


def get_build_info() -> BuildInfo:
    # Priority: live git repo -> direct_url.json -> unknown
    for getter in (_from_git_repo, _from_direct_url):
        info = getter()
        if info and info.commit:
            return info
    return BuildInfo(commit=None, dirty=False)


def get_version_string() -> str:
    info = get_build_info()
    version = f"hecto {get_version()}"
    if not info.commit:
        return version
    dirty_suffix = "-dirty" if info.dirty else ""
    # Use short (7-character) git hashes
    return f"{version} ({info.commit[:7]}{dirty_suffix})"
