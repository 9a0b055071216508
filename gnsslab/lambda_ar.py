"""Integer ambiguity resolution with the modified LAMBDA method."""

from __future__ import annotations

import math
import sys

import numpy as np

from .errors import InvalidRequest, InvalidSolver

_LOOP_MAX = 10000


def _round(x: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _sign(x: float) -> float:
    """Search direction sign: -1 for zero or negative values, +1 otherwise."""
    if x > 0.0:
        return 1.0
    return -1.0


def factorize(q):
    """LtDL factorisation ``Q = L' * diag(D) * L``.

    Returns ``(L, D)``. Raises InvalidSolver if ``Q`` is not positive definite.
    """
    qc = np.array(q, dtype=float, copy=True)
    n = qc.shape[0]
    l = np.zeros((n, n))
    d = np.zeros(n)

    for i in range(n - 1, -1, -1):
        d[i] = qc[i, i]
        if d[i] <= 0.0:
            raise InvalidSolver("Covariance matrix is not positive definite.")
        root = math.sqrt(d[i])
        l[i, : i + 1] = qc[i, : i + 1] / root
        for j in range(i):
            qc[j, : j + 1] -= l[i, : j + 1] * l[i, j]
        l[i, : i + 1] /= l[i, i]
    return l, d


def _gauss(l: np.ndarray, z: np.ndarray, i: int, j: int) -> None:
    mu = _round(l[i, j])
    if mu != 0:
        l[i:, j] -= mu * l[i:, i]
        z[:, j] -= mu * z[:, i]


def _permute(l: np.ndarray, d: np.ndarray, j: int, delta: float, z: np.ndarray) -> None:
    eta = d[j] / delta
    lam = d[j + 1] * l[j + 1, j] / delta
    d[j] = eta * d[j + 1]
    d[j + 1] = delta

    a0 = l[j, :j].copy()
    a1 = l[j + 1, :j].copy()
    l[j, :j] = -l[j + 1, j] * a0 + a1
    l[j + 1, :j] = eta * a0 + lam * a1
    l[j + 1, j] = lam

    l[j + 2 :, [j, j + 1]] = l[j + 2 :, [j + 1, j]]
    z[:, [j, j + 1]] = z[:, [j + 1, j]]


def reduction(l, d):
    """Decorrelate an LtDL factorisation by integer Gauss transforms and permutations.

    Returns ``(L, D, Z)`` where ``Z`` is the unimodular transformation matrix.
    """
    l = np.array(l, dtype=float, copy=True)
    d = np.array(d, dtype=float, copy=True)
    n = l.shape[0]
    z = np.eye(n)

    j = k = n - 2
    while j >= 0:
        if j <= k:
            for i in range(j + 1, n):
                _gauss(l, z, i, j)
        delta = d[j] + l[j + 1, j] * l[j + 1, j] * d[j + 1]
        if delta + 1e-6 < d[j + 1]:
            _permute(l, d, j, delta, z)
            k = j
            j = n - 2
        else:
            j -= 1
    return l, d, z


def search(l, d, zs, m=2):
    """Modified LAMBDA search for the ``m`` best integer vectors.

    Returns ``(zn, s)``: candidates as columns of ``zn`` (n x m) and their
    squared distances ``s``, sorted in ascending order.
    """
    l = np.asarray(l, dtype=float)
    d = np.asarray(d, dtype=float)
    zs = np.asarray(zs, dtype=float)
    n = l.shape[0]

    zn = np.zeros((n, m))
    s = np.zeros(m)
    partial = np.zeros((n, n))
    dist = np.zeros(n)
    zb = np.zeros(n)
    z = np.zeros(n)
    step = np.zeros(n)

    k = n - 1
    zb[k] = zs[k]
    z[k] = _round(zb[k])
    y = zb[k] - z[k]
    step[k] = _sign(y)

    found = 0
    imax = 0
    maxdist = 1e99
    for _ in range(_LOOP_MAX):
        newdist = dist[k] + y * y / d[k]
        if newdist < maxdist:
            if k != 0:
                k -= 1
                dist[k] = newdist
                partial[k, : k + 1] = (
                    partial[k + 1, : k + 1] + (z[k + 1] - zb[k + 1]) * l[k + 1, : k + 1]
                )
                zb[k] = zs[k] + partial[k, k]
                z[k] = _round(zb[k])
                y = zb[k] - z[k]
                step[k] = _sign(y)
            else:
                if found < m:
                    if found == 0 or newdist > s[imax]:
                        imax = found
                    zn[:, found] = z
                    s[found] = newdist
                    found += 1
                else:
                    if newdist < s[imax]:
                        zn[:, imax] = z
                        s[imax] = newdist
                        imax = int(np.argmax(s))
                    maxdist = s[imax]
                z[0] += step[0]
                y = zb[0] - z[0]
                step[0] = -step[0] - _sign(step[0])
        else:
            if k == n - 1:
                break
            k += 1
            z[k] += step[k]
            y = zb[k] - z[k]
            step[k] = -step[k] - _sign(step[k])

    order = np.argsort(s, kind="stable")
    return zn[:, order], s[order]


def lambda_search(a, q, m=2):
    """Integer least-squares estimation of float parameters ``a`` with covariance ``q``.

    Returns ``(F, s)``: the ``m`` best fixed solutions as columns of ``F`` and
    their squared residuals ``s``.
    """
    a = np.asarray(a, dtype=float).ravel()
    q = np.asarray(q, dtype=float)
    if q.ndim != 2 or a.size != q.shape[0] or q.shape[0] != q.shape[1]:
        raise InvalidRequest("The dimension of input does not match.")
    if m < 1:
        raise InvalidRequest("The number of fixed solutions must be at least 1.")

    l, d = factorize(q)
    l, d, z = reduction(l, d)
    zn, s = search(l, d, z.T @ a, m)
    try:
        fixed = np.linalg.solve(z.T, zn)
    except np.linalg.LinAlgError as exc:
        raise InvalidSolver("Transformation matrix is singular.") from exc
    return fixed, s


class ARLambda:
    """Ambiguity resolver holding the ratio of the last resolution."""

    def __init__(self):
        self.squared_ratio = 0.0

    def resolve(self, amb_float, amb_cov):
        """Return the best integer vector for float ambiguities and their covariance."""
        amb_float = np.asarray(amb_float, dtype=float).ravel()
        amb_cov = np.asarray(amb_cov, dtype=float)
        if amb_cov.ndim != 2 or amb_float.size != amb_cov.shape[0] or amb_float.size != amb_cov.shape[1]:
            raise InvalidRequest(
                "The dimension of input does not match. "
                "Cannot perform Ambiguity Resolution!"
            )
        fixed, s = lambda_search(amb_float, amb_cov, 2)
        self.squared_ratio = 9999.9 if s[0] < 1e-12 else s[1] / s[0]
        return fixed[:, 0].copy()

    def is_fixed(self, threshold=3.0):
        """Whether the last ratio test passed ``threshold``."""
        return self.squared_ratio > threshold


SAMPLE_FLOAT = np.array([-9.75792, 22.1086, -1.98908, 3.36186, 23.2148, 7.75073])
SAMPLE_COV = np.array(
    [
        [0.0977961, 0.0161137, 0.0468261, 0.0320695, 0.080857, 0.0376408],
        [0.0161137, 0.0208976, 0.0185378, 0.00290225, 0.0111409, 0.0247762],
        [0.0468261, 0.0185378, 0.0435412, 0.0227732, 0.0383208, 0.0382978],
        [0.0320695, 0.00290225, 0.0227732, 0.0161712, 0.0273471, 0.0154774],
        [0.080857, 0.0111409, 0.0383208, 0.0273471, 0.0672121, 0.0294637],
        [0.0376408, 0.0247762, 0.0382978, 0.0154774, 0.0294637, 0.0392536],
    ]
)


def main(argv=None):
    """Resolve a sample set of double-differenced ambiguities."""
    print(SAMPLE_FLOAT.reshape(-1, 1))
    print(SAMPLE_COV)
    resolver = ARLambda()
    try:
        fixed = resolver.resolve(SAMPLE_FLOAT, SAMPLE_COV)
    except (InvalidRequest, InvalidSolver) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Float Ambiguity: \t{SAMPLE_FLOAT}")
    print(f"Integer Ambiguity: \t{fixed}")
    print(f"ratio: \t{resolver.squared_ratio:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())