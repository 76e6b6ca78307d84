#!/usr/bin/env python3
"""Helper script to check the store configuration and create a template .env file."""

import sys
from pathlib import Path

TEMPLATE = """# Relational store (Supabase)
BIN_SUPABASE_URL=https://your-project-id.supabase.co
BIN_SUPABASE_KEY=your-service-role-key-here

# Graph store (Neo4j)
BIN_NEO4J_URI=neo4j+s://your-instance.databases.neo4j.io
BIN_NEO4J_USER=neo4j
BIN_NEO4J_PASSWORD=your-password-here

# Cache (Redis)
BIN_REDIS_URL=redis://localhost:6379
BIN_ROUTE_CACHE_TTL_SECONDS=300

# API Configuration
BIN_API_PREFIX=/api
# Comma-separated or JSON array: ["http://localhost:5173","http://127.0.0.1:5173"]
# BIN_FRONTEND_ALLOWED_ORIGINS=
"""

SECRET_FIELDS = ("BIN_SUPABASE_KEY", "BIN_NEO4J_PASSWORD")


def _mask(line: str) -> str:
    name, _, value = line.partition("=")
    if name.strip() in SECRET_FIELDS and len(value.strip()) > 8:
        return f"{name}={value.strip()[:4]}..."
    return line


def main():
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("Bin Service Environment Checker")
    print("=" * 60)
    print()

    if not env_file.exists():
        env_file.write_text(TEMPLATE, encoding="utf-8")
        print(f"✅ Created template .env file at: {env_file}")
        print("⚠️  Please edit .env and add your store credentials!")
        return

    print(f"✅ Found .env file at: {env_file}")
    print("-" * 60)
    for line in env_file.read_text(encoding="utf-8").splitlines():
        print(_mask(line))
    print("-" * 60)
    print()

    sys.path.insert(0, str(project_root / "src"))
    try:
        from binservice.config import settings
    except Exception as e:
        print(f"❌ Error loading config: {e}")
        return

    checks = {
        "Supabase": bool(settings.supabase_url and settings.supabase_key),
        "Neo4j": bool(settings.neo4j_uri and settings.neo4j_password),
        "Redis": bool(settings.redis_url),
    }
    for store, configured in checks.items():
        print(f"{'✅' if configured else '❌'} {store} {'configured' if configured else 'NOT configured'}")

    if not all(checks.values()):
        print()
        print("Make sure variables start with the BIN_ prefix and restart the backend after editing .env")
    print(f"Log level: {settings.log_level}")


if __name__ == "__main__":
    main()
