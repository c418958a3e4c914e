"""Keyhub Quickstart: issue, check and revoke an API key."""

from keyhub import CredentialService

# 1. Create a service (SQLite, zero config)
svc = CredentialService(db_path="quickstart.db")

# 2. Issue a key for a signed-in user
key = svc.create("user-1", "Dev Key", kind="dev")
print(f"Issued {key.display_name!r}: {key.token}")

# 3. A machine client only needs the token
print(f"valid? {svc.validate(key.token).valid}")

# 4. The owner manages their keys
svc.update("user-1", key.id, display_name="Dev Key (laptop)")
for k in svc.list("user-1"):
    print(f"  {k.id}  {k.display_name}  usage={k.usage_counter}")

# 5. Revoke
svc.delete("user-1", key.id)
print(f"valid after delete? {svc.validate(key.token).valid}")
