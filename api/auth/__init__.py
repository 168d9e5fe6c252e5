"""
Signup, login and the bearer-token gate for protected routes.
"""
