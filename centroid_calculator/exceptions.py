class AbortAction(Exception):
    pass
