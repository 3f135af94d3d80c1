"""
Example showing how to build a MailChimpClient and upsert a member.

Reads MAILCHIMP_API_KEY, MAILCHIMP_DC and MAILCHIMP_LIST_ID from the
environment. Performs real requests when the credentials are valid.
"""

import logging

from chimplite.client import MailChimpClient
from chimplite.exceptions import MailChimpError


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    try:
        client = MailChimpClient.from_env()
    except MailChimpError as e:
        print("Invalid configuration:", e)
    else:
        with client:
            try:
                print("Health:", client.get_health().health_status)
                member = client.create_member("jan@example.com", "Jan", "Novak")
                print("Member status:", member and member.get("status"))
                print("Subscribed:", client.is_subscribed("jan@example.com"))
            except MailChimpError as exc:  # pragma: no cover - runtime example
                print("Request failed:", exc)
