"""
Angle conversion constants shared by the value types.
"""
import numpy as np

TWO_PI = 2.0 * np.pi
RAD2DEG = 180.0 / np.pi
DEG2RAD = np.pi / 180.0
