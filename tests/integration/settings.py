ADMIN_API_KEY = "test-admin-key-12345"
API_PREFIX = "/api/v1"
