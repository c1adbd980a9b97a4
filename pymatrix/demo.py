"""
Demonstration program: a product, a scaled product and a transpose.

Run with:
    python -m pymatrix
"""

from pymatrix.dense import Matrix


def main() -> None:
    m1 = Matrix.from_rows([[1, 2, 1], [4, 1, 3]])
    ones = Matrix.ones(3, 4, dtype=int)
    m2 = m1.dot(ones)
    print(ones)
    print(m2)
    print(m2.dot_scalar(2))
    print(m2.transpose())


if __name__ == "__main__":
    main()
