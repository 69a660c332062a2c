"""Common functions for all tests

"""

# System library imports
import pathlib

# Third party imports
import pytest

EXAMPLE_DIR = pathlib.Path(__file__).parent / "parsers" / "example_files"

HEADER = """\
begin_of_head =================================================================
product_type             gravity_field
modelname                TEST-MODEL
earth_gravity_constant   0.3986004415E+15
radius                   0.63781363E+07
max_degree               {max_degree}
errors                   formal
norm                     fully_normalized

key    L    M    C                  S                    sigma C    sigma S
end_of_head ===================================================================
"""


@pytest.fixture
def example_path():
    """Path to an example file in the parsers/example_files-directory"""
    return lambda name: EXAMPLE_DIR / name


@pytest.fixture
def icgem_file(tmp_path):
    """Write an ICGEM file with the given data lines to a temporary directory"""
    return lambda data_lines, max_degree=4, name="test.gfc": _write_icgem_file(
        tmp_path / name, data_lines, max_degree
    )


def _write_icgem_file(file_path, data_lines, max_degree):
    """Write an ICGEM file with a simple header

    Args:
        file_path (Path):     Path to the file that will be written.
        data_lines (list):    Lines of the data section, without line endings.
        max_degree (int):     Max degree written in the header.

    Returns:
        Tuple: The path to the file and the byte offset of the data section.
    """
    header = HEADER.format(max_degree=max_degree)
    file_path.write_bytes((header + "".join(f"{line}\n" for line in data_lines)).encode("ascii"))
    return file_path, len(header.encode("ascii"))


@pytest.fixture
def static_lines():
    """Data lines of a static model where every coefficient is given a value identifying it"""
    return _static_lines


def _static_lines(max_degree, max_order=None, skip=()):
    """Data lines of a static model where every coefficient is given a value identifying it

    C(l, m) is written as l + m / 100, and S(l, m) as -C(l, m) for m > 0.
    """
    max_order = max_degree if max_order is None else max_order
    lines = list()
    for degree in range(max_degree + 1):
        for order in range(min(degree, max_order) + 1):
            if (degree, order) in skip:
                continue
            clm = degree + order / 100
            slm = 0.0 if order == 0 else -clm
            lines.append(f"gfc {degree:4d} {order:4d} {clm: .12E} {slm: .12E} 1.0000E-12 1.0000E-12")
    return lines
