# Formats a whole number of seconds as MM:SS. Minutes are not wrapped into hours, so 100 minutes reads "100:00".
# Negative values clamp to zero.
def format_time(seconds):
    seconds = max(0, int(seconds))
    m, s = divmod(seconds, 60)
    return f"{m:02d}:{s:02d}"
