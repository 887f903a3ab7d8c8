from .core import run_inference, simulate_attempts, grade
from .io import write_steps_csv, write_manifest

__all__ = ["run_inference", "simulate_attempts", "grade", "write_steps_csv", "write_manifest"]
