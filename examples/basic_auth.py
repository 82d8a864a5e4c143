"""
Basic Login Example - Register, log in, and read the session cookie back.
"""

from jokes_auth import AuthClient, FormResult, Redirect
from jokes_auth.config import Settings


def main():
    settings = Settings(session_secret="my-secret-key", bcrypt_rounds=10)
    client = AuthClient.from_settings(settings)

    # Register (creates user + session)
    result = client.handle_login_form({
        "loginType": "register",
        "username": "kody",
        "password": "twixrox",
        "redirectTo": "/jokes/new",
    })

    if isinstance(result, Redirect):
        print(f"Registered! Redirecting to {result.location}")
        print(f"Set-Cookie: {result.set_cookie[:60]}...")
    else:
        print(f"Registration failed: {result.to_dict()}")
        return

    # What the browser sends back on the next request
    cookie = result.set_cookie.split(";")[0]
    user = client.get_user(cookie)
    print(f"\nLogged in as: {user.username} ({user.user_id})")

    # Wrong password
    failed = client.handle_login_form({
        "loginType": "login",
        "username": "kody",
        "password": "not-twixrox",
    })
    if isinstance(failed, FormResult):
        print(f"\nLogin failed: {failed.form_error}")

    # Field validation
    invalid = client.handle_login_form({
        "loginType": "login",
        "username": "ko",
        "password": "123",
    })
    print(f"Validation errors: {invalid.to_dict()['fieldErrors']}")


if __name__ == "__main__":
    main()
