"""Tests for core data models."""
from docker_heatmap.models.activity import ActivityResponse, ProfileData, Theme
from docker_heatmap.models.user import DockerAccount, UpdateProfileRequest, User


class TestUser:
    def test_parse(self, user_json):
        user = User.model_validate(user_json)
        assert user.github_username == "alice"
        assert user.email is None
        assert user.public_profile is True

    def test_display_name_falls_back_to_handle(self, user_json):
        user = User.model_validate({**user_json, "name": None})
        assert user.display_name == "alice"
        assert User.model_validate(user_json).display_name == "Alice"


class TestDockerAccount:
    def test_optional_flags(self):
        account = DockerAccount.model_validate(
            {"id": 1, "docker_username": "alice", "last_sync_at": None}
        )
        assert account.sync_in_progress is None
        assert account.last_sync_error is None

    def test_full(self):
        account = DockerAccount.model_validate({
            "id": 1,
            "docker_username": "alice",
            "is_active": True,
            "auto_refresh": False,
            "last_sync_at": "2024-06-01T00:00:00Z",
            "last_sync_error": "rate limited",
            "sync_in_progress": True,
        })
        assert account.last_sync_error == "rate limited"
        assert account.sync_in_progress is True


class TestUpdateProfileRequest:
    def test_unset_fields_are_dropped(self):
        update = UpdateProfileRequest(public_profile=False)
        assert update.model_dump(exclude_none=True) == {"public_profile": False}


class TestActivity:
    def test_active_days(self):
        data = ActivityResponse.model_validate({
            "username": "alice",
            "days": 3,
            "totals": {"activities": 5, "pushes": 4, "pulls": 1, "builds": 0},
            "activity": [
                {"date": "2024-06-01", "count": 0, "level": 0},
                {"date": "2024-06-02", "count": 2, "level": 1, "pushes": 2},
                {"date": "2024-06-03", "count": 3, "level": 2},
            ],
        })
        assert data.active_days == 2
        assert data.totals.pushes == 4

    def test_profile(self):
        profile = ProfileData.model_validate({
            "user": {"github_username": "alice", "name": None, "bio": None, "avatar_url": ""},
            "docker": {"username": "alice", "last_sync_at": None},
            "stats": {"total_activities": 12},
        })
        assert profile.stats.total_activities == 12
        assert profile.available_themes is None

    def test_theme(self):
        theme = Theme.model_validate({
            "id": "github", "name": "GitHub", "bg_color": "#fff",
            "text_color": "#000", "colors": ["#ebedf0", "#216e39"],
        })
        assert theme.colors[-1] == "#216e39"
