from .controls import ControlInputs, ControlPanel

__all__ = ["ControlInputs", "ControlPanel"]
