class RedAlertError(Exception):
    pass

class FeedError(RedAlertError):
    """The calendar feed could not be fetched or lexed."""
