"""CLI utility functions."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True
    )

    # Reduce noise from some libraries
    logging.getLogger('hydra').setLevel(logging.WARNING)


def parse_edge(values: List[str]) -> Tuple[int, int, float]:
    """Parse a ``SRC DST COST`` triple given on the command line.

    Raises:
        ValueError: If the vertices are not integers or the cost is not a number
    """
    if len(values) != 3:
        raise ValueError(f"Edge needs SRC DST COST, got {values}")
    src, dst, cost = values
    try:
        return int(src), int(dst), _parse_number(cost)
    except ValueError:
        raise ValueError(f"Invalid edge {' '.join(values)}: vertices must be integers, cost a number") from None


def _parse_number(text: str) -> Union[int, float]:
    try:
        return int(text)
    except ValueError:
        return float(text)


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
        pretty: Whether to pretty-print JSON
    """
    output_path = Path(output_path)

    # Ensure output directory exists
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Convert numpy values and dataclass states for JSON serialization
    def convert(obj):
        if hasattr(obj, 'tolist'):
            return obj.tolist()
        elif isinstance(obj, dict):
            return {str(k): convert(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [convert(item) for item in obj]
        elif hasattr(obj, '__dict__'):
            return {k: convert(v) for k, v in obj.__dict__.items()}
        else:
            return obj

    serializable_results = convert(results)

    with open(output_path, 'w') as f:
        if pretty:
            json.dump(serializable_results, f, indent=2, sort_keys=True)
        else:
            json.dump(serializable_results, f)


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0.001:
        return f"{seconds*1000000:.1f}µs"
    elif seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"


def format_path(path: List[Any]) -> str:
    """Render a path as ``a -> b -> c`` (or a placeholder when empty)."""
    if not path:
        return "(no path)"
    return " -> ".join(str(state) for state in path)
