"""Foundation layer: errors, configuration, host contract and testing helpers."""
