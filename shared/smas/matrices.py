"""
Built-in stoichiometric matrix and reference reaction vector.

S_MAT is the default 39 x 28 coefficient matrix (rows: species, columns:
reactions). R_STD_015 is a validated reaction vector for that network, kept
as a regression fixture. Both arrays are read-only; use
util.default_s_matrix() for a writable copy.
"""

import numpy as np


N_SPECIES = 39
N_REACTIONS = 28

S_MAT = np.array([
    [ 0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 0
    [ 0,  0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 1
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1, -3,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 2
    [ 0,  0,  0,  0,  0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 3
    [ 2,  0, -2,  0, -2,  0,  0,  0,  0,  0,  0,  0,  0,  1,  0,  2,  0,  0,  0,  0, -1,  1,  0,  0,  0,  0,  0,  0],  # 4
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1],  # 5
    [ 0,  0,  0,  0,  0,  0,  0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  0],  # 6
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0, -1, -1,  0, -1],  # 7
    [-2,  0,  2,  0,  2,  0,  0,  0,  0,  0,  0,  0,  0, -1,  0, -2,  0,  0,  0,  0,  1, -1,  0,  0,  0,  0,  0,  0],  # 8
    [ 0,  0,  0,  0,  0,  0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 9
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  2, -4,  0,  0,  0,  0,  0,  0,  0,  0],  # 10
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0, -2,  4,  0,  0,  0,  0,  0,  0,  0,  0],  # 11
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0, -2,  0,  0,  0,  0,  0,  0,  1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 12
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  2,  0,  0,  0,  0,  0,  0, -1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 13
    [ 1, -1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 14
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  0,  0],  # 15
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 16
    [-1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0, -1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 17
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0, -1,  0],  # 18
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  0],  # 19
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 20
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  4,  0,  4,  4, -3,  0,  0,  0,  0,  0,  0,  0],  # 21
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0, -5,  0, -4, -4,  3,  0,  0,  0,  0,  0,  0,  0],  # 22
    [ 0,  0,  0,  0,  0, -2,  2,  0, -2,  2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 23
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  0,  0,  0,  0,  0],  # 24
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  0,  0,  0,  0],  # 25
    [ 0, -2,  0,  0,  0, -2,  0, -2, -2,  0,  0,  0, -2,  0,  0, -1,  1,  0,  0,  0,  0,  0,  0,  1,  0,  0,  0,  0],  # 26
    [ 0,  2,  0,  0,  0,  2,  0,  2,  2,  0,  0,  0,  2,  0,  0,  1, -1,  0,  0,  0,  0,  0,  0, -1,  0,  0,  0,  0],  # 27
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0, -1,  0, -3,  0,  0,  0,  0,  0,  0,  1,  0,  0,  0, -1,  0],  # 28
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  0,  3,  0,  0,  0,  0,  0,  0, -1,  0,  0,  0,  1,  0],  # 29
    [ 0,  0,  0,  0,  0,  0, -2,  0,  0,  0,  0,  0,  2,  0,  0,  0,  0,  0,  0,  0,  0,  1,  0,  0,  1,  0,  0,  0],  # 30
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1, -1,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 31
    [ 0,  0,  0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 32
    [ 0,  0,  0,  0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0, -1, -1, -1,  0,  0,  0,  0],  # 33
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0, -1, -1,  1,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 34
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  1,  1, -1,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 35
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 36
    [ 0,  0,  0,  0,  0,  0,  0,  0,  0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 37
    [ 0,  0,  0,  0,  0,  0,  0,  0,  2, -2,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0,  0],  # 38
], dtype=float)
S_MAT.flags.writeable = False

R_STD_015 = np.array([
    5.4416e-07, 13086, 13186, 13798, 1.0884e-06, 1.423e-05, 1.4392e-05,
    1.8305e-06, 2.1326e-05, 2420.6, 7014.5, 1.8217e+05, 1.7251e+05,
    2.5834e-06, 2.5908e-06, 5.3759e-07, 4.4686e-15, 1.8068e-08, 4.4686e-15,
    4.4686e-15, 2.7206e-07, 2.7213e-07, 7.9655e-10, 3.039e+05, 3.0447e+05,
    3.6711e+05, 8901.3, 2.7438e+05,
], dtype=float)
R_STD_015.flags.writeable = False
