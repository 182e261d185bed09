"""Google login tests (POST /api/auth/google-login) with the fake verifier."""


def test_unknown_google_email_is_new_user_challenge(client, google_verifier, stored_interns):
    google_verifier.add("g-token-new", "New.Person@Gmail.com")

    response = client.post("/api/auth/google-login", json={"token": "g-token-new"})

    assert response.status_code == 200
    assert response.json() == {"isNewUser": True, "email": "new.person@gmail.com"}
    assert stored_interns() == []


def test_challenge_then_profile_completion_creates_one_intern(client, google_verifier, stored_interns):
    google_verifier.add("g-token-new", "new.person@gmail.com")
    challenge = client.post("/api/auth/google-login", json={"token": "g-token-new"}).json()

    response = client.post(
        "/api/auth/update-intern-id",
        json={"email": challenge["email"], "internId": "G1", "firstName": "New", "lastName": "Person"},
    )

    assert response.status_code == 200
    assert response.json()["token"]
    rows = stored_interns()
    assert len(rows) == 1
    assert rows[0].email == "new.person@gmail.com"
    assert rows[0].password_hash is None

    # next Google login goes straight through
    again = client.post("/api/auth/google-login", json={"token": "g-token-new"})
    assert again.status_code == 200
    body = again.json()
    assert body["isNewUser"] is False
    assert body["token"]
    assert "email" not in body


def test_known_email_gets_token(client, google_verifier, signup_payload, token_issuer, stored_interns):
    client.post("/api/auth/signup", json=signup_payload)
    google_verifier.add("g-token-ann", "ANN@test.com ")

    response = client.post("/api/auth/google-login", json={"token": "g-token-ann"})

    assert response.status_code == 200
    body = response.json()
    assert body["isNewUser"] is False
    assert token_issuer.decode(body["token"])["sub"] == str(stored_interns()[0].id)


def test_verification_failure_is_server_error(client, google_verifier):
    response = client.post("/api/auth/google-login", json={"token": "forged"})

    assert response.status_code == 500
    assert response.json() == {"message": "Google login failed"}
    assert google_verifier.calls == ["forged"]


def test_missing_google_token(client, google_verifier):
    response = client.post("/api/auth/google-login", json={})

    assert response.status_code == 400
    assert response.json() == {"message": "Google token is required"}
    assert google_verifier.calls == []
