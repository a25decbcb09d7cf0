# app/smoke_regression.py
# Run: python app/smoke_regression.py
from rowmat import (
    loads_matrix, dumps_matrix, diagonal, matrix, consists_of, shape,
)
from rowmat.logging_config import setup_logging


def main():
    setup_logging()

    # ragged input is padded with the int default
    M, stream = loads_matrix("1 2 3\n4 5\n\n")
    text = dumps_matrix(M)
    print("PARSED:", M, "fail=", stream.fail)
    print("DUMPED:", repr(text))
    assert M == [[1, 2, 3], [4, 5, 0]], "ragged rows should be padded to 2x3"
    assert not stream.fail, "blank-line terminated input should leave the stream good"
    assert text == " 1 2 3\n 4 5 0\n\n"

    # immediate blank line -> no rows
    E, stream = loads_matrix("\n")
    assert E == [] and shape(E) == (0, 0) and not stream.fail

    # missing terminator: rows kept, stream failed
    T, stream = loads_matrix("1 2\n3 4\n")
    print("UNTERMINATED:", T, "fail=", stream.fail)
    assert T == [[1, 2], [3, 4]] and stream.fail

    assert diagonal(3, 7) == [[7, 0, 0], [0, 7, 0], [0, 0, 7]]
    assert diagonal([1, 2, 3]) == [[1, 0, 0], [0, 2, 0], [0, 0, 3]]
    assert matrix(2, 3, 9) == [[9, 9, 9], [9, 9, 9]]
    assert consists_of([[5, 5], [5, 5]], 5)
    assert not consists_of([[5, 5], [5, 6]], 5)
    print("OK: codec and builder regression passed.")


if __name__ == "__main__":
    main()
