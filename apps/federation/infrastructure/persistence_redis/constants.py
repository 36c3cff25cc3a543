"""Redis key constants."""

# 원본 문서 저장소의 "users" 컬렉션과 같은 네임스페이스
PROFILE_KEY_PREFIX = "users:"
