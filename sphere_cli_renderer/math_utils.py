#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math


class Vec3:
    """Immutable 3-component point/vector.

    Every operation returns a new Vec3; instances are never mutated after
    construction, so they are safe to use as dict keys.
    """
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def at(cls, x: float, y: float, z: float) -> 'Vec3':
        return cls(x, y, z)

    @classmethod
    def from_spherical(cls, radius: float, polar: float, azimuth: float) -> 'Vec3':
        """Point at `radius` from the origin, `polar` measured from +Z."""
        sin_polar = math.sin(polar)
        return cls(
            radius * sin_polar * math.cos(azimuth),
            radius * sin_polar * math.sin(azimuth),
            radius * math.cos(polar)
        )

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def rotate_x(self, rad: float) -> 'Vec3':
        return Mat4.rotation_x(rad).mul_vec3(self)

    def rotate_y(self, rad: float) -> 'Vec3':
        return Mat4.rotation_y(rad).mul_vec3(self)

    def rotate_z(self, rad: float) -> 'Vec3':
        return Mat4.rotation_z(rad).mul_vec3(self)

    def is_close(self, other, abs_tol: float = 1e-9) -> bool:
        return all(math.isclose(a, b, abs_tol=abs_tol) for a, b in zip(self, other))


class Mat4:
    """4x4 transform matrix, [row][col] storage.

    Only the rotational part is used by the renderer; the fourth row and
    column stay as in the identity.
    """
    __slots__ = ('m',)

    def __init__(self):
        self.m = [[0.0] * 4 for _ in range(4)]

    @classmethod
    def identity(cls) -> 'Mat4':
        res = cls()
        for i in range(4):
            res.m[i][i] = 1.0
        return res

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[1][1] = c
        mat.m[1][2] = -s
        mat.m[2][1] = s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][2] = s
        mat.m[2][0] = -s
        mat.m[2][2] = c
        return mat

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat4':
        mat = cls.identity()
        c = math.cos(rad)
        s = math.sin(rad)
        mat.m[0][0] = c
        mat.m[0][1] = -s
        mat.m[1][0] = s
        mat.m[1][1] = c
        return mat

    def __matmul__(self, other):
        # Composition: (a @ b).mul_vec3(v) == a.mul_vec3(b.mul_vec3(v))
        if isinstance(other, Mat4):
            res = Mat4()
            for r in range(4):
                for c in range(4):
                    val = 0.0
                    for k in range(4):
                        val += self.m[r][k] * other.m[k][c]
                    res.m[r][c] = val
            return res
        return NotImplemented

    def mul_vec3(self, v: Vec3) -> Vec3:
        """Multiply with Vec3 as if w=1, return Vec3 (ignoring w result)."""
        x = self.m[0][0]*v.x + self.m[0][1]*v.y + self.m[0][2]*v.z + self.m[0][3]
        y = self.m[1][0]*v.x + self.m[1][1]*v.y + self.m[1][2]*v.z + self.m[1][3]
        z = self.m[2][0]*v.x + self.m[2][1]*v.y + self.m[2][2]*v.z + self.m[2][3]
        return Vec3(x, y, z)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (not to even)."""
    floor = math.floor(value)
    frac = value - floor
    if frac > 0.5 or (frac == 0.5 and value >= 0):
        return floor + 1
    return floor
