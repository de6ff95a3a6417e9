#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Tiling parameter schema.

Each tiling declares its parameters as a list of controls. A control
knows its default value and how to coerce a caller supplied value into
its valid range. Bad values are clamped or replaced by the default,
never rejected.

====
"""
import math
import logging
import collections

logger = logging.getLogger(__name__)

FILL = 'fill'
OUTLINE = 'outline'
BACKGROUND = 'background'

COLOR_ROLE_CATEGORIES = (FILL, OUTLINE, BACKGROUND)


def _check_float(value, default):
    """Convert a number or numeric string to a finite float."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(value) or math.isinf(value):
        return default
    return value


class Slider(object):
    """A numeric parameter with a closed range.

    Args:
        key: Parameter name.
        label: Display label.
        min: Minimum value.
        max: Maximum value.
        default: Default value.
        step: Increment. Values are snapped to whole steps from `min`
            when the step is integral.
        description: Optional help text.
    """
    type = 'slider'

    def __init__(self, key, label, min, max, default, step=1,
                 description=None):
        self.key = key
        self.label = label
        self.min = min
        self.max = max
        self.default = default
        self.step = step
        self.description = description

    def normalize(self, value):
        """Coerce a value into [min, max]."""
        value = _check_float(value, self.default)
        value = min(max(value, self.min), self.max)
        if float(self.step).is_integer() and float(self.min).is_integer():
            return int(round(value))
        return value

    def __repr__(self):
        return 'Slider(%r, min=%r, max=%r, default=%r)' % (
            self.key, self.min, self.max, self.default)


class Select(object):
    """A parameter that takes one of an enumerated set of strings.

    Args:
        key: Parameter name.
        label: Display label.
        choices: A sequence of (value, label) pairs.
        default: Default value. Must be one of the choice values.
        description: Optional help text.
    """
    type = 'select'

    def __init__(self, key, label, choices, default, description=None):
        self.key = key
        self.label = label
        self.choices = tuple(choices)
        self.default = default
        self.description = description

    @property
    def values(self):
        """The valid choice values."""
        return tuple(value for value, dummy_label in self.choices)

    def normalize(self, value):
        """Return the value if it is a valid choice, otherwise the default."""
        if value in self.values:
            return value
        return self.default

    def __repr__(self):
        return 'Select(%r, values=%r, default=%r)' % (
            self.key, self.values, self.default)


ColorRole = collections.namedtuple('ColorRole',
                                   ('id', 'label', 'default', 'category'))


def default_options(controls):
    """The default parameter record for a list of controls."""
    return dict((control.key, control.default) for control in controls)

def normalize_options(controls, options=None):
    """Build a complete, valid parameter record.

    Missing keys take their default value. Numeric values (or numeric
    strings) are clamped to the slider range and select values that
    are not one of the choices are replaced by the default.
    Keys that no control declares are dropped.

    Args:
        controls: A sequence of :class:`Slider` or :class:`Select`.
        options: A mapping of caller supplied values. May be None.

    Returns:
        A new dict.
    """
    if options is None:
        options = {}
    result = {}
    for control in controls:
        value = options.get(control.key, control.default)
        result[control.key] = control.normalize(value)
        if result[control.key] != value:
            logger.debug('option %s: %r -> %r',
                         control.key, value, result[control.key])
    return result

def default_palette(color_roles):
    """Map each color role id to its default color."""
    return dict((role.id, role.default) for role in color_roles)

def role_for_category(color_roles, category):
    """The first color role of a category or None."""
    for role in color_roles:
        if role.category == category:
            return role
    return None
