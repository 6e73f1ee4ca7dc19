"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

from typing import Tuple, Union


class GeoPoint:
    """
    Representation of an observing station's position on the globe (i.e., a lat/lon pair).

    Unlike a general-purpose coordinate, values are not wrapped into the valid
    latitude/longitude ranges; geodesic calculations receive them exactly as given.
    """

    __slots__ = ('latitude', 'longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        object.__setattr__(self, 'latitude', float(latitude))
        object.__setattr__(self, 'longitude', float(longitude))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    def to_float(self) -> Tuple[float, float]:
        """Returns the (latitude, longitude) pair"""
        return self.latitude, self.longitude
