"""Configuration management."""

import json
from typing import List, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, field, fields
import yaml
from signgrav.physics.diagnostics import DEFAULT_MAX_CYCLE_STEPS
from signgrav.physics.validation import validate_initial_positions, validate_steps


@dataclass
class Config:
    """Run configuration."""
    # Simulation parameters
    initial_positions: List[int] = field(default_factory=list)
    steps: int = 0
    backend: str = "numpy"
    
    # Reporting
    report_every: int = 1
    plot_path: Optional[str] = None
    
    # Cycle search
    max_cycle_steps: int = DEFAULT_MAX_CYCLE_STEPS
    
    def validate(self):
        """Raise the simulator's input errors for bad positions or steps, ValueError otherwise."""
        validate_initial_positions(self.initial_positions)
        validate_steps(self.steps)
        _check_count("report_every", self.report_every, minimum=1)
        _check_count("max_cycle_steps", self.max_cycle_steps, minimum=0)


def _check_count(name: str, value, minimum: int):
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ValueError(f"{name} must be an integer >= {minimum}, got {value!r}")


def _is_yaml(path: Path) -> bool:
    return path.suffix in ('.yaml', '.yml')


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if _is_yaml(config_path):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")
    
    unknown = sorted(str(key) for key in set(data) - {f.name for f in fields(Config)})
    if unknown:
        raise ValueError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")
    
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if _is_yaml(output_path):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
