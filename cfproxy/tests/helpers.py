import httpx


def make_problem(name, rating, tags, contest_id=1000, index="A"):
    return {
        "contestId": contest_id,
        "index": index,
        "name": name,
        "type": "PROGRAMMING",
        "rating": rating,
        "tags": tags,
    }


def envelope(problems, status="OK"):
    return {"status": status, "result": {"problems": problems, "problemStatistics": []}}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def record(request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)
