# API Route Constants

# Base API
API_BASE = '/api'

# Club routes
CLUB_REGISTER = f'{API_BASE}/club-register'
CLUB_LOGIN = f'{API_BASE}/club-login'
CLUB_DASHBOARD = f'{API_BASE}/club-dashboard'

# Event routes
EVENT_BASE = f'{API_BASE}/events'
EVENT_LIST = EVENT_BASE
EVENT_CREATE = EVENT_BASE
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_UPDATE = f'{EVENT_BASE}/{{event_id}}'
EVENT_DELETE = f'{EVENT_BASE}/{{event_id}}'
EVENT_REGISTER = f'{EVENT_BASE}/{{event_id}}/register'

# Member routes
MEMBER_BASE = f'{API_BASE}/members'
MEMBER_LIST = MEMBER_BASE
MEMBER_CREATE = MEMBER_BASE
MEMBER_DELETE = f'{MEMBER_BASE}/{{member_id}}'

# Live update routes
LIVE_UPDATE_ADD = f'{API_BASE}/add-update'
LIVE_UPDATE_LIST = f'{API_BASE}/updates'
LIVE_UPDATE_STREAM = f'{API_BASE}/updates/stream'
LIVE_UPDATE_WS = '/ws/updates'
