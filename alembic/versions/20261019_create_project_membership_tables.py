"""create_project_membership_tables

Revision ID: a1c4e7f20b31
Revises:
Create Date: 2026-10-19 10:00:00.000000

Creates the project membership schema:
1. Users, Teams, Projects, Tasks
2. ProjectRoles (unique per user/project)
3. Reference sets: ProjectMembers, UserProjectRoles, TeamAdmins,
   TeamContributors, TeamProjects

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = 'a1c4e7f20b31'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def _reference_set(name: str, left: tuple, right: tuple, right_indexed: bool = True) -> None:
    """Create a two-column association table with a composite primary key."""
    left_column, left_table = left
    right_column, right_table = right
    op.create_table(
        name,
        sa.Column(left_column, sa.Uuid(), nullable=False),
        sa.Column(right_column, sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint([left_column], [f'{left_table}.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint([right_column], [f'{right_table}.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint(left_column, right_column),
    )
    if right_indexed:
        op.create_index(f'ix_{name}_{right_column}', name, [right_column])


def upgrade() -> None:
    """Upgrade database schema."""
    # ==========================================================================
    # 1. Entity tables
    # ==========================================================================
    op.create_table(
        'Users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_Users_email', 'Users', ['email'], unique=True)

    op.create_table(
        'Teams',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'Projects',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('team_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['team_id'], ['Teams.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_Projects_type', 'Projects', ['type'])
    op.create_index('ix_Projects_team_id', 'Projects', ['team_id'])

    op.create_table(
        'Tasks',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('project_id', sa.Uuid(), nullable=False),
        sa.Column('assigned_to', sa.Uuid(), nullable=True),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['project_id'], ['Projects.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['assigned_to'], ['Users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_Tasks_project_id', 'Tasks', ['project_id'])
    op.create_index('ix_Tasks_assigned_to', 'Tasks', ['assigned_to'])

    # ==========================================================================
    # 2. ProjectRoles - at most one per (user, project)
    # ==========================================================================
    op.create_table(
        'ProjectRoles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('project_id', sa.Uuid(), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['Users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['project_id'], ['Projects.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'project_id', name='uq_ProjectRoles_user_project'),
    )
    op.create_index('ix_ProjectRoles_user_id', 'ProjectRoles', ['user_id'])
    op.create_index('ix_ProjectRoles_project_id', 'ProjectRoles', ['project_id'])
    op.create_index('ix_ProjectRoles_role', 'ProjectRoles', ['role'])

    # ==========================================================================
    # 3. Reference sets
    # ==========================================================================
    _reference_set('ProjectMembers', ('project_id', 'Projects'), ('user_id', 'Users'))
    _reference_set(
        'UserProjectRoles',
        ('user_id', 'Users'),
        ('project_role_id', 'ProjectRoles'),
        right_indexed=False,
    )
    _reference_set('TeamAdmins', ('team_id', 'Teams'), ('user_id', 'Users'))
    _reference_set('TeamContributors', ('team_id', 'Teams'), ('user_id', 'Users'))
    _reference_set('TeamProjects', ('team_id', 'Teams'), ('project_id', 'Projects'), right_indexed=False)
    # A project belongs to at most one team
    op.create_unique_constraint('uq_TeamProjects_project_id', 'TeamProjects', ['project_id'])


def downgrade() -> None:
    """Downgrade database schema."""
    for name in ('TeamProjects', 'TeamContributors', 'TeamAdmins', 'UserProjectRoles', 'ProjectMembers'):
        op.drop_table(name)
    op.drop_table('ProjectRoles')
    op.drop_table('Tasks')
    op.drop_table('Projects')
    op.drop_table('Teams')
    op.drop_table('Users')
