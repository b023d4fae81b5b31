class BaseObject(object):
    """
    Provides a readable `__repr__` built from the instance attributes. Attributes starting with an underscore are hidden.
    """

    def __repr__(self):
        field_str = ', '.join([f'{k}={v!r}' for k, v in self.__dict__.items() if not k.startswith('_')])
        return f'<{self.__class__.__name__}: {field_str}>'


    def __str__(self):
        return self.__repr__()
