"""
Move execution for Shelver.

Applies planned moves to the filesystem, or reports them in dry-run mode.
"""

import errno
import os
import shutil
from datetime import datetime
from pathlib import Path
from tqdm import tqdm


def _is_same_file(src: Path, dst: Path) -> bool:
    """True if both paths exist and refer to the same filesystem entry."""
    try:
        return os.path.samefile(src, dst)
    except OSError:
        return False


def _move_file(src: Path, dst: Path) -> dict:
    """Move a single file, overwriting an existing destination file."""
    res = {"source": str(src), "destination": str(dst), "status": "failed", "error": None}

    if _is_same_file(src, dst):
        res["status"] = "skipped"
        res["error"] = "Source and destination are the same"
        return res

    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        res["error"] = f"Failed to create directory {dst.parent}: {e}"
        return res

    try:
        try:
            os.replace(src, dst)
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise
            # Cross-device: copy then remove
            shutil.move(str(src), str(dst))
    except OSError as e:
        res["error"] = f"Failed to rename {src} to {dst}: {e}"
        return res

    res["status"] = "moved"
    return res


def apply_moves(
    moves: list[dict],
    dest_root: Path | str = ".",
    dry_run: bool = False,
    show_progress: bool = True
) -> dict:
    """
    Apply (or simulate) planned moves.

    Moves run one at a time in the given order. A failed move is recorded
    and execution continues with the next one.

    Args:
        moves: Planned move dicts with "source" and "dest" (relative to dest_root).
        dest_root: Destination root directory.
        dry_run: If True, only report the moves.
        show_progress: Show a progress bar during a live run.

    Returns:
        Report dict with per-move results and planned/moved/skipped/failed counts.
    """
    dest_root = Path(dest_root)
    results: list[dict] = []
    executed_moves_count = 0
    skipped_moves_count = 0
    failed_moves_count = 0

    mode = "DRY-RUN" if dry_run else "APPLY"
    print(f"\n[{mode}] Processing {len(moves)} moves...")

    if dry_run:
        for move in moves:
            dst = dest_root / move["dest"]
            print(f"  [WOULD MOVE] {move['source']} -> {dst}")
            results.append({
                "source": move["source"],
                "destination": str(dst),
                "status": "planned",
                "error": None
            })
    else:
        for move in tqdm(moves, unit="file", disable=not show_progress):
            res = _move_file(Path(move["source"]), dest_root / move["dest"])
            results.append(res)

            if res["status"] == "moved":
                executed_moves_count += 1
            elif res["status"] == "skipped":
                skipped_moves_count += 1
                tqdm.write(f"[SKIP] {res['source']} (source and destination are the same)")
            else:
                failed_moves_count += 1
                tqdm.write(f"[ERROR] {res['error']}: {res['source']}")

    report = {
        "dest_root": str(dest_root),
        "dry_run": dry_run,
        "executed_at": datetime.now().isoformat(timespec='seconds'),
        "planned_moves_count": len(moves),
        "executed_moves_count": executed_moves_count,
        "skipped_moves_count": skipped_moves_count,
        "failed_moves_count": failed_moves_count,
        "moves": results
    }

    if dry_run:
        print(f"\n[{mode}] Complete: {len(moves)} planned")
    else:
        print(f"\n[{mode}] Complete: {executed_moves_count} moved, "
              f"{skipped_moves_count} skipped, {failed_moves_count} failed")

    return report
