import uuid

from locust import HttpUser, task, between


class FileHostUser(HttpUser):
    wait_time = between(1, 3)

    password = "Password1!"

    def on_start(self):
        self.username = f"load-{uuid.uuid4().hex[:12]}"
        response = self.client.post("/register", json={"username": self.username,
                                                       "email": f"{self.username}@example.com",
                                                       "password": self.password})
        self.headers = {"Authorization": f"Bearer {response.json()['token']}"}
        self.public_urls = []

    @task(2)
    def login(self):
        self.client.post("/login", json={"username": self.username, "password": self.password})

    @task(3)
    def upload_and_publish(self):
        response = self.client.post("/upload",
                                    files={"file": ("load.txt", b"hello from locust", "text/plain")},
                                    headers=self.headers)
        file_id = response.json()["file"]["id"]

        published = self.client.post(f"/files/{file_id}/make_public", headers=self.headers,
                                     name="/files/[id]/make_public")
        self.public_urls.append(published.json()["public_url"])

    @task(5)
    def list_files(self):
        self.client.get("/files", headers=self.headers)

    @task(5)
    def read_public_file(self):
        if self.public_urls:
            self.client.get(self.public_urls[-1], name="/public/[id]")
