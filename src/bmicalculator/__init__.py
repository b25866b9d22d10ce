"""BMI calculator: a small PySide6 form that validates, computes and classifies body-mass index."""
