"""
Job Portal
A job board backend: admins post jobs, students browse and apply,
profiles carry resume/avatar uploads.

Architecture:
- MongoDB: users, jobs, companies, applications
- Cloudinary: hosted avatars and resumes
- jobportal.client: Python model of the profile page and its data fetchers
"""

__version__ = "1.0.0"
