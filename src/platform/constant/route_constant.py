# API Route Constants

# Showtime routes
SHOWTIME_BASE = '/showtimes'
SHOWTIME_CREATE = SHOWTIME_BASE
SHOWTIME_GET = f'{SHOWTIME_BASE}/{{showtime_id}}'
SHOWTIME_UPDATE = f'{SHOWTIME_BASE}/update/{{showtime_id}}'
SHOWTIME_DELETE = f'{SHOWTIME_BASE}/{{showtime_id}}'

# Booking routes
BOOKING_BASE = '/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_LIST = BOOKING_BASE
BOOKING_GET = f'{BOOKING_BASE}/{{booking_id}}'

# Movie routes
MOVIE_BASE = '/movies'
MOVIE_CREATE = MOVIE_BASE
MOVIE_LIST = f'{MOVIE_BASE}/all'
MOVIE_UPDATE = f'{MOVIE_BASE}/update/{{movie_title}}'
MOVIE_DELETE = f'{MOVIE_BASE}/{{movie_title}}'

# System routes
HEALTH = '/health'
