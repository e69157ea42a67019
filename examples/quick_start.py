"""Quick start example: bound the velocity and acceleration of a trajectory segment."""

from polytraj import Polynomial

# Minimum-jerk rest-to-rest move from 0 to 1 m in T = 2 s:
# p(t) = 10 (t/T)^3 - 15 (t/T)^4 + 6 (t/T)^5
T = 2.0
segment = Polynomial([0.0, 0.0, 0.0, 10.0 / T**3, -15.0 / T**4, 6.0 / T**5])

names = ["position", "velocity", "acceleration", "jerk", "snap"]
for derivative, name in enumerate(names):
    lo, hi = segment.find_min_max(0.0, T, derivative)
    print(f"{name:>12}: min {lo: .6f}  max {hi: .6f}")

# Location of the velocity peak
v_max, t_peak = segment.maximize(0.0, T, derivative=1)
print(f"\nPeak velocity {v_max:.6f} m/s at t = {t_peak:.6f} s")

# Feasibility check against dynamic limits
v_limit, a_limit = 1.0, 1.5
_, v_hi = segment.find_min_max(0.0, T, 1)
a_lo, a_hi = segment.find_min_max(0.0, T, 2)
feasible = v_hi <= v_limit and max(abs(a_lo), abs(a_hi)) <= a_limit
print(f"Feasible for |v| <= {v_limit}, |a| <= {a_limit}: {feasible}")
