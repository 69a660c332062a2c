"""Get gravity coefficients for a given gravity field

Description:

Reads a gravity field from a file in the ICGEM format [1] as available from the International Centre for Global Earth
Models (ICGEM) website [2]. The header, the structure and the coefficients of the file are read with
:class:`~icgem.reader.IcgemReader`, and stored in a :class:`~icgem.data.GravityField` sized for the requested degree
and order.

Usage of the gravity coefficients is described in the book 'Satellite Orbits' [3] as well as in section 6 of the IERS
Conventions [4].

References:
[1] Barthelmes, Franz and Förste, Christoph, The ICGEM-format.
    http://icgem.gfz-potsdam.de/ICGEM/documents/ICGEM-Format-2011.pdf

[2] The International Centre for Global Earth Models (ICGEM).
    http://icgem.gfz-potsdam.de/ICGEM/

[3] Montenbruck, Oliver and Gill, Eberhard, Satellite Orbits,
    Springer Verlag, 2000.

[4] Petit, G. and Luzum, B. (eds.), IERS Conventions (2010),
    IERS Technical Note No. 36, BKG (2010).
    http://www.iers.org/IERS/EN/Publications/TechnicalNotes/tn36.html

"""

# Midgard imports
from midgard.dev import plugins

# Icgem imports
from icgem import data
from icgem.lib import exceptions
from icgem.lib import log
from icgem.reader import IcgemReader


@plugins.register
def get_gravity_field(file_path, degree, order=None):
    """Get coefficients for a gravity field

    The coefficient files usually come with normalized gravity coefficients, see `GravityField.normalized`.

    Args:
        file_path:  Path to ICGEM file.
        degree:     Level of degree where coeffs are truncated.
        order:      Level of order where coeffs are truncated, default is the same as degree.

    Returns:
        GravityField containing static and time variable coefficients.
    """
    order = degree if order is None else order
    reader = IcgemReader(file_path)
    header = reader.parse_header()
    structure = reader.inspect()

    if not 0 <= order <= degree <= structure.degree:
        raise exceptions.InvalidRangeError(
            f"Invalid degree/order {degree}/{order} for gravity model {reader.file_path} with max degree "
            f"{structure.degree}"
        )

    log.info(f"Reading gravity field {header.modelname or reader.file_path.name} up to degree and order {degree}/{order}")
    degree_tv = min(degree, structure.degree_tv_stop)
    field = data.GravityField(
        degree,
        order,
        degree_tv=degree_tv,
        periods=structure.periods,
        gm=header.earth_gravity_constant,
        radius=header.radius,
        normalized=header.is_normalized,
    )

    reader.extract(degree, order, field.static)
    if structure.has_time_variable:
        reader.extract_time_variable(degree_tv, min(order, degree_tv), field)

    return field
