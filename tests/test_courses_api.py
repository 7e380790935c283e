"""API tests for courses, enrollments and feedback."""

import unittest

from app.models import Course, Enrollment
from tests.support import ApiTestCase


class CourseApiTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.instructor = self.create_user("instructor", role="instructor")
        self.student = self.create_user("student")
        self.instructor_headers = self.auth_headers(self.instructor)
        self.student_headers = self.auth_headers(self.student)

    def create_course(self, title: str = "Intro to Python", category: str | None = "programming") -> dict:
        resp = self.client.post(
            "/api/courses",
            json={"title": title, "description": "Basics", "category": category},
            headers=self.instructor_headers,
        )
        self.assertEqual(resp.status_code, 201)
        return resp.json()


class TestCourses(CourseApiTestCase):
    """Course creation is for instructors; listing and lookup are public."""

    def test_instructor_creates_course(self) -> None:
        course = self.create_course()
        self.assertEqual(course["title"], "Intro to Python")
        self.assertEqual(course["createdBy"]["username"], "instructor")
        self.assertNotIn("passwordHash", course["createdBy"])
        self.assertIsNotNone(course["createdAt"])

    def test_student_cannot_create_course(self) -> None:
        resp = self.client.post(
            "/api/courses",
            json={"title": "Nope"},
            headers=self.student_headers,
        )
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json(), {"error": "Instructor access required"})
        self.assertEqual(self.db.query(Course).count(), 0)

    def test_anonymous_cannot_create_course(self) -> None:
        resp = self.client.post("/api/courses", json={"title": "Nope"})
        self.assertEqual(resp.status_code, 401)

    def test_blank_title_rejected(self) -> None:
        resp = self.client.post(
            "/api/courses",
            json={"title": "   "},
            headers=self.instructor_headers,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("Title must not be empty", resp.json()["error"])

    def test_list_and_filter_by_category(self) -> None:
        first = self.create_course("Intro to Python", "programming")
        self.create_course("Watercolours", "art")
        resp = self.client.get("/api/courses")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([c["title"] for c in resp.json()], ["Intro to Python", "Watercolours"])

        resp = self.client.get("/api/courses", params={"category": "programming"})
        self.assertEqual([c["id"] for c in resp.json()], [first["id"]])

    def test_get_by_id(self) -> None:
        course = self.create_course()
        resp = self.client.get(f"/api/courses/{course['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["title"], "Intro to Python")

    def test_get_missing_course(self) -> None:
        resp = self.client.get("/api/courses/999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Course 999 not found"})

    def test_out_of_range_id_is_client_error(self) -> None:
        resp = self.client.get("/api/courses/99999999999999999999")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("course_id", resp.json()["error"])
        resp = self.client.get("/api/courses/0")
        self.assertEqual(resp.status_code, 400)


class TestEnrollments(CourseApiTestCase):
    """POST /api/enrollments and GET /api/enrollments/user."""

    def test_enroll_and_list(self) -> None:
        course = self.create_course()
        resp = self.client.post(
            "/api/enrollments",
            json={"courseId": course["id"]},
            headers=self.student_headers,
        )
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["courseId"], course["id"])
        self.assertEqual(body["userId"], self.student.id)
        self.assertIsNotNone(body["enrolledAt"])

        resp = self.client.get("/api/enrollments/user", headers=self.student_headers)
        self.assertEqual(resp.status_code, 200)
        enrollments = resp.json()
        self.assertEqual(len(enrollments), 1)
        self.assertEqual(enrollments[0]["course"]["title"], "Intro to Python")

        resp = self.client.get("/api/enrollments/user", headers=self.instructor_headers)
        self.assertEqual(resp.json(), [])

    def test_repeat_enrollment_creates_second_row(self) -> None:
        course = self.create_course()
        for _ in range(2):
            resp = self.client.post(
                "/api/enrollments",
                json={"courseId": course["id"]},
                headers=self.student_headers,
            )
            self.assertEqual(resp.status_code, 201)
        self.assertEqual(
            self.db.query(Enrollment).filter(Enrollment.user_id == self.student.id).count(),
            2,
        )

    def test_enroll_in_missing_course(self) -> None:
        resp = self.client.post(
            "/api/enrollments",
            json={"courseId": 404},
            headers=self.student_headers,
        )
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Course 404 not found"})

    def test_enroll_out_of_range_course_id(self) -> None:
        resp = self.client.post(
            "/api/enrollments",
            json={"courseId": 99999999999999999999},
            headers=self.student_headers,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("courseId", resp.json()["error"])
        self.assertEqual(self.db.query(Enrollment).count(), 0)

    def test_enroll_requires_token(self) -> None:
        resp = self.client.post("/api/enrollments", json={"courseId": 1})
        self.assertEqual(resp.status_code, 401)


class TestFeedback(CourseApiTestCase):
    """POST /api/feedback and GET /api/feedback/course/{id}."""

    def test_submit_and_list(self) -> None:
        course = self.create_course()
        resp = self.client.post(
            "/api/feedback",
            json={"courseId": course["id"], "feedback": "  Great pace.  "},
            headers=self.student_headers,
        )
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["feedback"], "Great pace.")
        self.assertEqual(body["user"]["username"], "student")

        resp = self.client.get(f"/api/feedback/course/{course['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([f["feedback"] for f in resp.json()], ["Great pace."])

    def test_empty_feedback_rejected(self) -> None:
        course = self.create_course()
        resp = self.client.post(
            "/api/feedback",
            json={"courseId": course["id"], "feedback": "   "},
            headers=self.student_headers,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("Feedback must not be empty", resp.json()["error"])

    def test_feedback_for_missing_course(self) -> None:
        resp = self.client.post(
            "/api/feedback",
            json={"courseId": 77, "feedback": "Hello"},
            headers=self.student_headers,
        )
        self.assertEqual(resp.status_code, 404)
        resp = self.client.get("/api/feedback/course/77")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Course 77 not found"})

    def test_feedback_out_of_range_course_id(self) -> None:
        resp = self.client.get("/api/feedback/course/99999999999999999999")
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post(
            "/api/feedback",
            json={"courseId": 99999999999999999999, "feedback": "Hello"},
            headers=self.student_headers,
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("courseId", resp.json()["error"])


if __name__ == "__main__":
    unittest.main()
