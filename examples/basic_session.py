"""
Basic Session Example - log in against the IMS API and persist the session.

Run twice: the second run restores the session from the storage file
instead of logging in again.

    IMS_API_BASE_URL=http://localhost:8080 python examples/basic_session.py
"""

from ims_dashboard import AuthClient, Credentials, SessionStore
from ims_dashboard.adapters import FileStorageAdapter, HttpAuthAdapter
from ims_dashboard.config import get_settings


def main():
    settings = get_settings()

    # Restore whatever session a previous run left behind
    storage = FileStorageAdapter(settings.storage_path)
    store = SessionStore(storage)
    auth = HttpAuthAdapter(settings.api_base_url, timeout=settings.api_timeout_seconds)
    client = AuthClient(auth=auth, store=store)

    if client.is_authenticated():
        print(f"Restored session for: {client.get_user_info()['username']}")
        print(f"Token still valid: {client.validate_session()}")
    else:
        outcome = client.sign_in(Credentials(username="admin", password="admin123"))
        print(outcome.message)
        if not outcome.success:
            for error in outcome.errors:
                print(f"  - {error}")
            return

        print(f"User: {client.get_user_info()}")
        print(f"Token: {client.get_token()[:20]}...")

    # Logout clears both memory and the storage file
    client.logout()
    print(f"Authenticated after logout: {client.is_authenticated()}")

    auth.close()


if __name__ == "__main__":
    main()
