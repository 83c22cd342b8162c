"""add_ownerinfo_rls_policies

Revision ID: 7f52e0b8c914
Revises: 4c1d9a7e2b30
Create Date: 2025-06-02 18:05:12.502871

"""

from collections.abc import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "7f52e0b8c914"
down_revision: str | Sequence[str] | None = "4c1d9a7e2b30"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Row Level Security for direct Supabase client access.

    The API connects with a role that bypasses RLS; these policies cover the
    front end talking to Supabase directly. Members may read and insert only
    their own ownerinfo row. There is no UPDATE or DELETE policy, so the row
    is immutable for members once written.

    The insert policy requires a birth date that is not in the future but
    does not check the minimum-age cutoff year: that is configurable
    (MINIMUM_BIRTH_YEAR_CUTOFF) and enforced by the API only.
    """
    op.execute("ALTER TABLE ownerinfo ENABLE ROW LEVEL SECURITY;")
    op.execute("ALTER TABLE profiles ENABLE ROW LEVEL SECURITY;")

    op.execute("""
        CREATE POLICY ownerinfo_select_own ON ownerinfo
            FOR SELECT USING (uuid = (SELECT auth.uid()));
    """)
    op.execute("""
        CREATE POLICY ownerinfo_insert_own ON ownerinfo
            FOR INSERT WITH CHECK (
                uuid = (SELECT auth.uid())
                AND fechadenacimiento IS NOT NULL
                AND fechadenacimiento <= CURRENT_DATE
            );
    """)

    # Profiles are readable by any signed-in member (avatars, names)
    op.execute("""
        CREATE POLICY profiles_select_authenticated ON profiles
            FOR SELECT USING ((SELECT auth.uid()) IS NOT NULL);
    """)
    op.execute("""
        CREATE POLICY profiles_update_own ON profiles
            FOR UPDATE USING (user_id = (SELECT auth.uid()));
    """)


def downgrade() -> None:
    """Remove ownerinfo and profiles RLS policies."""
    op.execute("DROP POLICY IF EXISTS profiles_update_own ON profiles;")
    op.execute("DROP POLICY IF EXISTS profiles_select_authenticated ON profiles;")
    op.execute("DROP POLICY IF EXISTS ownerinfo_insert_own ON ownerinfo;")
    op.execute("DROP POLICY IF EXISTS ownerinfo_select_own ON ownerinfo;")
    op.execute("ALTER TABLE profiles DISABLE ROW LEVEL SECURITY;")
    op.execute("ALTER TABLE ownerinfo DISABLE ROW LEVEL SECURITY;")
