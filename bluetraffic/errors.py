# bluetraffic/errors.py


class DataUnavailable(RuntimeError):
    """
    Raised when the station list or the trip log cannot be loaded.
    The pipeline refuses to start on partial data.
    """
