class PrecisionOutOfRange(ValueError):
    def __init__(self, value: int, lower: int, upper: int):
        self.value = value
        self.lower = lower
        self.upper = upper
        self.bound = lower if value < lower else upper
        relation = "less" if value < lower else "more"
        super().__init__(
            f"precision out of bounds: {value} (cannot be {relation} than {self.bound}, "
            f"valid range is [{lower}, {upper}])"
        )
