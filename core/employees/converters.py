class SignedIntConverter:
    """Path converter accepting negative integers, e.g. ``/Employees/Details/-1``."""

    regex = r"-?\d+"

    def to_python(self, value):
        return int(value)

    def to_url(self, value):
        return str(int(value))
