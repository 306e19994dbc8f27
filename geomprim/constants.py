"""Scalar registration table and inference defaults.

The registration lists are closed: a scalar name that is not listed for a
dimension cannot back a point of that dimension.
"""

# Integer widths (bits)
INT_BITS = {"i32": 32, "i64": 64, "i128": 128}

# Registered scalars per dimension
SCALARS_2D = ("i32", "i64", "i128", "f32", "f64")
SCALARS_3D = ("i32", "i64", "i128", "f32")
SCALARS_BY_DIM = {2: SCALARS_2D, 3: SCALARS_3D}

# Inference defaults when no scalar is given
DEFAULT_INT_SCALAR = "i64"
DEFAULT_FLOAT_SCALAR = {2: "f64", 3: "f32"}
