"""Response messages shared by the REST routers."""

# Success
USER_REGISTERED = "User registered successfully"
USER_CREATED = "User created successfully"
USER_FETCHED = "User retrieved successfully"
USERS_FETCHED = "Users retrieved successfully"
USER_UPDATED = "User updated successfully"
USER_DELETED = "User deleted successfully"
LOGIN_SUCCEEDED = "Login successful"
TOKEN_REFRESHED = "Token refreshed successfully"

PRODUCT_CREATED = "Product created successfully"
PRODUCT_FETCHED = "Product retrieved successfully"
PRODUCTS_FETCHED = "Products retrieved successfully"
PRODUCT_UPDATED = "Product updated successfully"
PRODUCT_DELETED = "Product deleted successfully"

# Failure
REGISTER_FAILED = "Failed to register user"
CREATE_USER_FAILED = "Failed to create user"
GET_USER_FAILED = "Failed to get user"
GET_USERS_FAILED = "Failed to get users"
UPDATE_USER_FAILED = "Failed to update user"
DELETE_USER_FAILED = "Failed to delete user"
LOGIN_FAILED = "Failed to login"
REFRESH_FAILED = "Failed to refresh token"

CREATE_PRODUCT_FAILED = "Failed to create product"
GET_PRODUCT_FAILED = "Failed to get product"
GET_PRODUCTS_FAILED = "Failed to get products"
UPDATE_PRODUCT_FAILED = "Failed to update product"
DELETE_PRODUCT_FAILED = "Failed to delete product"

INVALID_REQUEST = "Invalid request"
TOO_MANY_REQUESTS = "Too many requests"
INTERNAL_ERROR = "Internal server error"
