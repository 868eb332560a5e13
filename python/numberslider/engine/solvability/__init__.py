from numberslider.engine.solvability.checker import SolvabilityChecker

__all__ = ["SolvabilityChecker"]
