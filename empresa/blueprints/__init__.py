"""
Blueprint package: one blueprint per resource plus ``main``.
"""

from flask import jsonify
from werkzeug.routing import IntegerConverter

from empresa.mappers.payload import BIGINT_MAX, BIGINT_MIN


class BigIntConverter(IntegerConverter):
    """
    ``<bigint:name>`` path segments: signed, within a 64-bit column.

    Negative ages and salaries are valid filter values.  Numbers outside
    the storable range do not match the route, so they answer 404
    instead of reaching the database driver.
    """

    def __init__(self, url_map, fixed_digits=0):
        super().__init__(
            url_map,
            fixed_digits=fixed_digits,
            min=BIGINT_MIN,
            max=BIGINT_MAX,
            signed=True,
        )


def json_list(transfer_objects):
    """Serialize a list of transfer objects into a JSON response body."""
    return jsonify([to.to_dict() for to in transfer_objects])
