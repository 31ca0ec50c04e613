"""
Ellipsoid parameters and datums (with Helmert transform parameters relative to WGS84)

Note that the precision of the various datums will vary, and WGS84 (original) is not
defined to be accurate to better than ±1 metre. No transformation should be assumed
to be accurate to better than a metre; for many datums somewhat less.

Sources:
    - ED50:          www.gov.uk/guidance/oil-and-gas-petroleum-operations-notices#pon-4
    - Irl1975:       www.osi.ie/wp-content/uploads/2015/05/transformations_booklet.pdf
    - NAD27:         en.wikipedia.org/wiki/Helmert_transformation
    - NAD83 (2009):  www.uvm.edu/giv/resources/WGS84_NAD83.pdf
                     (functionally equivalent to WGS84)
    - NTF:           geodesie.ign.fr/contenu/fichiers/Changement_systeme_geodesique.pdf
    - OSGB36:        www.ordnancesurvey.co.uk/docs/support/guide-coordinate-systems-great-britain.pdf
    - Potsdam:       kartoweb.itc.nl/geometrics/Coordinate%20transformations/coordtrans.html
    - TokyoJapan:    www.geocachingtoolbox.com?page=datumEllipsoidDetails
    - WGS72:         www.icao.int/safety/pbn/documentation/eurocontrol/eurocontrol wgs 84 implementation manual.pdf
"""

__all__ = [
    'Datum', 'Ellipsoid', 'HelmertTransform',
    'DATUMS', 'ELLIPSOIDS', 'REFERENCE_DATUM',
    'ED50', 'IRL1975', 'NAD27', 'NAD83', 'NTF', 'OSGB36', 'POTSDAM',
    'TOKYO_JAPAN', 'WGS72', 'WGS84',
    'get_datum', 'get_ellipsoid',
]

from types import MappingProxyType
from typing import Mapping, NamedTuple, Union

from geodesy._const import WGS84_A, WGS84_B, WGS84_F
from geodesy.exceptions import InvalidInputError


class Ellipsoid(NamedTuple):
    """
    Ellipsoid parameters

    Args:
        a:
            Semi-major axis, in meters

        b:
            Semi-minor axis, in meters

        f:
            Flattening, (a - b) / a
    """
    a: float
    b: float
    f: float

    @property
    def eccentricity_squared(self) -> float:
        """1st eccentricity squared, (a²-b²)/a²"""
        return 2 * self.f - self.f * self.f

    @property
    def second_eccentricity_squared(self) -> float:
        """2nd eccentricity squared, (a²-b²)/b²"""
        e2 = self.eccentricity_squared
        return e2 / (1 - e2)

    @property
    def third_flattening(self) -> float:
        """3rd flattening, (a-b)/(a+b)"""
        return self.f / (2 - self.f)


class HelmertTransform(NamedTuple):
    """
    Seven-parameter Helmert transform. Translations are in meters, scale in parts
    per million, rotations in arcseconds.
    """
    tx: float = 0.
    ty: float = 0.
    tz: float = 0.
    s: float = 0.
    rx: float = 0.
    ry: float = 0.
    rz: float = 0.

    def inverse(self) -> 'HelmertTransform':
        """
        The reverse transform. Negating the parameters is only valid for the small
        rotations and scale changes used between geodetic datums.
        """
        return HelmertTransform(*(-x for x in self))

    @property
    def is_identity(self) -> bool:
        return not any(self)


class Datum(NamedTuple):
    """
    A named ellipsoid plus the Helmert transform converting WGS84 cartesian
    coordinates into this datum.
    """
    name: str
    ellipsoid: Ellipsoid
    transform: HelmertTransform

    def __repr__(self):
        return f'<Datum({self.name})>'


ELLIPSOIDS: Mapping[str, Ellipsoid] = MappingProxyType({
    'WGS84': Ellipsoid(WGS84_A, WGS84_B, WGS84_F),
    'Airy1830': Ellipsoid(6377563.396, 6356256.909, 1 / 299.3249646),
    'AiryModified': Ellipsoid(6377340.189, 6356034.448, 1 / 299.3249646),
    'Bessel1841': Ellipsoid(6377397.155, 6356078.962818, 1 / 299.1528128),
    'Clarke1866': Ellipsoid(6378206.4, 6356583.8, 1 / 294.978698214),
    'Clarke1880IGN': Ellipsoid(6378249.2, 6356515.0, 1 / 293.466021294),
    'GRS80': Ellipsoid(6378137.0, 6356752.314140, 1 / 298.257222101),
    'Intl1924': Ellipsoid(6378388.0, 6356911.946, 1 / 297.0),  # aka Hayford
    'WGS72': Ellipsoid(6378135.0, 6356750.5, 1 / 298.26),
})

# t in meters, s in ppm, r in arcseconds         tx        ty        tz         s         rx        ry        rz
ED50 = Datum('ED50', ELLIPSOIDS['Intl1924'], HelmertTransform(
    89.5, 93.8, 123.1, -1.2, 0.0, 0.0, 0.156
))
IRL1975 = Datum('Irl1975', ELLIPSOIDS['AiryModified'], HelmertTransform(
    -482.530, 130.596, -564.557, -8.150, -1.042, -0.214, -0.631
))
NAD27 = Datum('NAD27', ELLIPSOIDS['Clarke1866'], HelmertTransform(
    8.0, -160.0, -176.0, 0.0, 0.0, 0.0, 0.0
))
NAD83 = Datum('NAD83', ELLIPSOIDS['GRS80'], HelmertTransform(
    1.004, -1.910, -0.515, -0.0015, 0.0267, 0.00034, 0.011
))
NTF = Datum('NTF', ELLIPSOIDS['Clarke1880IGN'], HelmertTransform(
    168.0, 60.0, -320.0, 0.0, 0.0, 0.0, 0.0
))
OSGB36 = Datum('OSGB36', ELLIPSOIDS['Airy1830'], HelmertTransform(
    -446.448, 125.157, -542.060, 20.4894, -0.1502, -0.2470, -0.8421
))
POTSDAM = Datum('Potsdam', ELLIPSOIDS['Bessel1841'], HelmertTransform(
    -582.0, -105.0, -414.0, -8.3, 1.04, 0.35, -3.08
))
TOKYO_JAPAN = Datum('TokyoJapan', ELLIPSOIDS['Bessel1841'], HelmertTransform(
    148.0, -507.0, -685.0, 0.0, 0.0, 0.0, 0.0
))
WGS72 = Datum('WGS72', ELLIPSOIDS['WGS72'], HelmertTransform(
    0.0, 0.0, -4.5, -0.22, 0.0, 0.0, 0.554
))
WGS84 = Datum('WGS84', ELLIPSOIDS['WGS84'], HelmertTransform())

REFERENCE_DATUM = WGS84

DATUMS: Mapping[str, Datum] = MappingProxyType({
    datum.name: datum
    for datum in (
        ED50, IRL1975, NAD27, NAD83, NTF, OSGB36, POTSDAM, TOKYO_JAPAN, WGS72, WGS84
    )
})


def _lookup(registry: Mapping, name: str, kind: str):
    """Case-insensitive registry lookup"""
    for key, value in registry.items():
        if key.lower() == name.lower():
            return value

    raise InvalidInputError(f"Unknown {kind} '{name}'. Options: {list(registry.keys())}")


def get_ellipsoid(name: str) -> Ellipsoid:
    """
    Look up an ellipsoid by name, e.g. 'Airy1830'.

    Args:
        name:
            The ellipsoid name (case-insensitive)

    Returns:
        Ellipsoid
    """
    return _lookup(ELLIPSOIDS, name, 'ellipsoid')


def get_datum(datum: Union[str, Datum]) -> Datum:
    """
    Resolve a datum from its name, e.g. 'OSGB36'. Datum objects are returned as-is.

    Args:
        datum:
            The datum name (case-insensitive), or a Datum

    Returns:
        Datum
    """
    if isinstance(datum, Datum):
        return datum

    if not isinstance(datum, str):
        raise InvalidInputError(f'Datum must be a Datum or a datum name, not {type(datum)}')

    return _lookup(DATUMS, datum, 'datum')
