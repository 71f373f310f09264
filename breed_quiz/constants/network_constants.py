"""Network configuration constants for the Dog CEO API."""

DOG_API_BASE_URL: str = "https://dog.ceo/api"
RANDOM_IMAGE_URL: str = f"{DOG_API_BASE_URL}/breeds/image/random"
BREED_LIST_URL: str = f"{DOG_API_BASE_URL}/breeds/list/all"
TRANSFER_TIMEOUT_MS: int = 10_000
