"""Module with a parent class of all data structures."""

from dataclasses import dataclass

import numpy as np


@dataclass(eq=False)
class DataBase:
    """Base class of all data structures.

    Defines basic methods shared by all data structures.
    """

    # Fixed-length attributes as (key, size) pairs
    _fixed_length_attrs = {}

    # Variable-length attributes as (key, dtype) pairs
    _var_length_attrs = {}

    # Attributes specifying coordinates
    _pos_attrs = []

    # Attributes specifying vector components
    _vec_attrs = []

    # String attributes
    _str_attrs = []

    # Boolean attributes
    _bool_attrs = []

    # Attributes that should not be flattened (object lists)
    _skip_attrs = []

    # Euclidean axis labels
    _axes = ['x', 'y', 'z']

    def __post_init__(self):
        """Immediately called after building the class attributes.

        Provides three functions:
        - Gives default values to array-like attributes. If a default value was
          provided in the attribute definition, all instances of this class
          would point to the same memory location.
        - Casts array-like inputs (lists, tuples) to numpy arrays.
        - Casts strings when they are provided as binary objects and booleans
          when they are provided as integers.
        """
        # Provide default values to the variable-length array attributes
        for attr, dtype in self._var_length_attrs.items():
            value = getattr(self, attr)
            if value is None:
                value = np.empty(0, dtype=dtype)
            elif dtype is not object:
                value = np.asarray(value, dtype=dtype)
            setattr(self, attr, value)

        # Provide default values to the fixed-length array attributes
        for attr, size in self._fixed_length_attrs.items():
            value = getattr(self, attr)
            if value is None:
                value = np.full(size, -np.inf, dtype=np.float64)
            else:
                value = np.asarray(value, dtype=np.float64)
                assert len(value) == size, (
                        f"The `{attr}` attribute of "
                        f"`{self.__class__.__name__}` must have length "
                        f"{size}, got {len(value)}.")
            setattr(self, attr, value)

        # Cast stored binary strings back to regular strings
        for attr in self._str_attrs:
            if isinstance(getattr(self, attr), bytes):
                setattr(self, attr, getattr(self, attr).decode())

        # Cast integer flags to booleans
        for attr in self._bool_attrs:
            if isinstance(getattr(self, attr), (int, np.integer)):
                setattr(self, attr, bool(getattr(self, attr)))

    def as_dict(self):
        """Returns the data class as dictionary of (key, value) pairs.

        Returns
        -------
        dict
            Dictionary of attribute names and their values
        """
        return {k: v for k, v in self.__dict__.items()
                if k not in self._skip_attrs}

    def scalar_dict(self, attrs=None):
        """Returns the data class attributes as a dictionary of scalars.

        Vector attributes are expanded with their axis label, variable-length
        attributes are skipped.

        Parameters
        ----------
        attrs : List[str], optional
            List of attribute names to include in the dictionary. If not
            specified, all the keys are included.

        Returns
        -------
        dict
            Dictionary of scalar values
        """
        scalar_dict, found = {}, []
        for attr, value in self.as_dict().items():
            # If the attribute is not requested, skip
            if attrs is not None and attr not in attrs:
                continue
            found.append(attr)

            # Dispatch
            if attr in self._var_length_attrs:
                continue

            elif np.isscalar(value):
                scalar_dict[attr] = value

            elif attr in (self._pos_attrs + self._vec_attrs):
                for i, v in enumerate(value):
                    scalar_dict[f'{attr}_{self._axes[i]}'] = v

            elif attr in self._fixed_length_attrs:
                for i, v in enumerate(value):
                    scalar_dict[f'{attr}_{i}'] = v

            else:
                raise ValueError(
                        f"Cannot expand the `{attr}` attribute of "
                        f"`{self.__class__.__name__}` to scalar values.")

        if attrs is not None and len(attrs) != len(found):
            class_name = self.__class__.__name__
            miss = list(set(attrs).difference(set(found)))
            raise AttributeError(
                    f"Attribute(s) {miss} do(es) not appear in {class_name}.")

        return scalar_dict

    @classmethod
    def from_dict(cls, attrs):
        """Builds an instance from a dictionary of attribute values.

        Parameters
        ----------
        attrs : dict
            Dictionary of (attribute, value) pairs

        Returns
        -------
        DataBase
            Instance of the data class
        """
        return cls(**attrs)
