from __future__ import annotations


def format_elapsed_time(seconds: int) -> str:
    """Formats whole seconds as MM:SS, or H:MM:SS from one hour upwards."""
    if seconds < 0:
        raise ValueError(f'Elapsed time cannot be negative: {seconds}')
    hours, rem = divmod(int(seconds), 3600)
    minutes, secs = divmod(rem, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
