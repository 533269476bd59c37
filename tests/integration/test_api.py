"""
HTTP tests: routes, status codes, error bodies and camelCase payloads.
"""
import pytest

API = "/api/v1"


async def test_health(client):
    response = await client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == "1.0.0"


async def test_unknown_route_is_json_404(client):
    response = await client.get(f"{API}/nope")

    assert response.status_code == 404
    assert response.json()["error"] == "Not Found"


class TestAuthRoutes:
    async def test_signup_returns_user_and_token(self, client):
        response = await client.post(
            f"{API}/auth/signup",
            json={"email": "new@example.com", "password": "long-enough", "name": "New"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["email"] == "new@example.com"
        assert body["user"]["name"] == "New"
        assert "passwordHash" not in body["user"]
        assert body["token"]

    async def test_signup_duplicate_email(self, client, user):
        response = await client.post(
            f"{API}/auth/signup",
            json={"email": "student@example.com", "password": "long-enough", "name": "Again"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "error": "Signup failed",
            "message": "User with this email already exists",
        }

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "bad", "password": "long-enough", "name": "X"},
            {"email": "x@example.com", "password": "short", "name": "X"},
            {"email": "x@example.com", "password": "long-enough", "name": ""},
            {"email": "x@example.com"},
        ],
    )
    async def test_signup_validation(self, client, payload):
        response = await client.post(f"{API}/auth/signup", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"

    async def test_login(self, client, user):
        response = await client.post(
            f"{API}/auth/login",
            json={"email": "student@example.com", "password": "correct-horse"},
        )

        assert response.status_code == 200
        assert response.json()["user"]["id"] == user.user.id

    async def test_login_failures_look_the_same(self, client, user):
        wrong_password = await client.post(
            f"{API}/auth/login",
            json={"email": "student@example.com", "password": "wrong-horse"},
        )
        unknown_email = await client.post(
            f"{API}/auth/login",
            json={"email": "ghost@example.com", "password": "correct-horse"},
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()

    async def test_me(self, client, user, auth_headers):
        response = await client.get(f"{API}/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "user": {"id": user.user.id, "email": "student@example.com", "name": "Student"}
        }

    async def test_me_without_token(self, client):
        response = await client.get(f"{API}/auth/me")

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    async def test_me_with_garbage_token(self, client):
        response = await client.get(f"{API}/auth/me", headers={"Authorization": "Bearer nonsense"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"


class TestPassageRoutes:
    async def test_requires_auth(self, client, passage):
        response = await client.get(f"{API}/passages")
        assert response.status_code == 401

    async def test_list(self, client, passage, auth_headers):
        response = await client.get(f"{API}/passages", headers=auth_headers)

        assert response.status_code == 200
        passages = response.json()["passages"]
        assert len(passages) == 1
        assert passages[0]["title"] == "Test Passage"
        assert passages[0]["difficulty"] == "Medium"
        assert passages[0]["estimatedTime"] == 540
        assert "questions" not in passages[0]

    async def test_detail(self, client, passage, auth_headers):
        response = await client.get(f"{API}/passages/{passage.id}", headers=auth_headers)

        assert response.status_code == 200
        questions = response.json()["passage"]["questions"]
        assert [q["questionNumber"] for q in questions] == [1, 2, 3]
        assert [c["choiceLetter"] for c in questions[0]["choices"]] == ["A", "B", "C", "D"]

    async def test_detail_not_found(self, client, passage, auth_headers):
        response = await client.get(f"{API}/passages/9999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found", "message": "Passage not found"}

    async def test_detail_non_integer_id(self, client, auth_headers):
        response = await client.get(f"{API}/passages/abc", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"


class TestSessionFlow:
    async def _start(self, client, headers, passage_id, timed=False):
        response = await client.post(
            f"{API}/sessions",
            json={"passageId": passage_id, "timedSession": timed},
            headers=headers,
        )
        assert response.status_code == 201
        return response.json()

    async def test_full_flow(self, client, passage, auth_headers):
        started = await self._start(client, auth_headers, passage.id, timed=True)
        session_id = started["session"]["id"]
        questions = started["passage"]["questions"]
        assert started["session"]["totalQuestions"] == 3
        assert started["session"]["timedSession"] is True
        assert started["session"]["completedAt"] is None

        q1, q2 = questions[0], questions[1]
        right = next(c for c in q1["choices"] if c["isCorrect"])
        wrong = next(c for c in q2["choices"] if not c["isCorrect"])

        answered = await client.patch(
            f"{API}/sessions/{session_id}/answer",
            json={"questionId": q1["id"], "selectedChoiceId": right["id"]},
            headers=auth_headers,
        )
        assert answered.status_code == 200
        assert answered.json()["answer"]["isCorrect"] is True

        await client.patch(
            f"{API}/sessions/{session_id}/answer",
            json={"questionId": q2["id"], "selectedChoiceId": wrong["id"]},
            headers=auth_headers,
        )
        flagged = await client.patch(
            f"{API}/sessions/{session_id}/answer",
            json={"questionId": q2["id"], "isFlagged": True},
            headers=auth_headers,
        )
        assert flagged.json()["answer"]["isFlagged"] is True
        assert flagged.json()["answer"]["selectedChoiceId"] == wrong["id"]

        detail = await client.get(f"{API}/sessions/{session_id}", headers=auth_headers)
        assert detail.status_code == 200
        assert len(detail.json()["answers"]) == 3

        early = await client.get(f"{API}/sessions/{session_id}/results", headers=auth_headers)
        assert early.status_code == 400
        assert early.json()["error"] == "Session not yet completed"

        completed = await client.post(
            f"{API}/sessions/{session_id}/complete",
            json={"timeSpent": 412},
            headers=auth_headers,
        )
        assert completed.status_code == 200
        assert completed.json()["score"] == 1
        assert completed.json()["totalQuestions"] == 3
        assert completed.json()["session"]["timeSpent"] == 412

        again = await client.post(f"{API}/sessions/{session_id}/complete", headers=auth_headers)
        assert again.status_code == 400

        results = await client.get(f"{API}/sessions/{session_id}/results", headers=auth_headers)
        assert results.status_code == 200
        body = results.json()
        assert body["score"] == 1
        assert body["timeSpent"] == 412
        assert [r["status"] for r in body["questions"]] == ["correct", "incorrect", "unanswered"]
        assert body["questions"][1]["isFlagged"] is True
        assert body["questions"][2]["userAnswer"] is None
        assert body["questions"][2]["isCorrect"] is False
        assert len(body["questions"][2]["allChoices"]) == 4

        progress = await client.get(f"{API}/progress", headers=auth_headers)
        assert progress.status_code == 200
        stats = progress.json()["progress"]
        assert stats["totalSessions"] == 1
        assert stats["totalQuestionsAnswered"] == 3
        assert stats["totalCorrect"] == 1
        assert stats["averageScore"] == pytest.approx(33.33)
        assert stats["totalTimeSpent"] == 412
        assert stats["lastPracticeAt"] is not None

    async def test_untimed_complete_without_body(self, client, passage, auth_headers):
        started = await self._start(client, auth_headers, passage.id)

        response = await client.post(
            f"{API}/sessions/{started['session']['id']}/complete", headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["session"]["timeSpent"] is None

    async def test_start_unknown_passage(self, client, auth_headers):
        response = await client.post(
            f"{API}/sessions",
            json={"passageId": 9999, "timedSession": False},
            headers=auth_headers,
        )

        assert response.status_code == 404

    async def test_invalid_choice(self, client, passage, auth_headers):
        started = await self._start(client, auth_headers, passage.id)
        q1, q2 = started["passage"]["questions"][:2]

        response = await client.patch(
            f"{API}/sessions/{started['session']['id']}/answer",
            json={"questionId": q1["id"], "selectedChoiceId": q2["choices"][0]["id"]},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Failed to submit answer"

    async def test_other_users_session_is_hidden(self, client, passage, auth_headers, other_user):
        started = await self._start(client, auth_headers, passage.id)
        other_headers = {"Authorization": f"Bearer {other_user.token}"}

        response = await client.get(f"{API}/sessions/{started['session']['id']}", headers=other_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "Session not found"


async def test_progress_defaults(client, auth_headers):
    response = await client.get(f"{API}/progress", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["progress"] == {
        "totalSessions": 0,
        "totalQuestionsAnswered": 0,
        "totalCorrect": 0,
        "averageScore": 0.0,
        "totalTimeSpent": 0,
        "lastPracticeAt": None,
    }
