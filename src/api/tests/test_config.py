"""Unit tests for Settings loading from the environment."""

import unittest
from unittest.mock import patch

from api.config import Settings, load_settings


class TestSettingsFromEnv(unittest.TestCase):

    def test_defaults_with_only_secret(self):
        settings = Settings.from_env({"JWT_SECRET": "s3cret"})

        self.assertEqual(settings.jwt_secret, "s3cret")
        self.assertEqual(settings.storage_backend, "memory")
        self.assertIsNone(settings.database_url)
        self.assertEqual(settings.mongodb_database, "auth_db")
        self.assertEqual(settings.cors_origins, "*")
        self.assertEqual(settings.port, 3000)

    def test_missing_secret_fails(self):
        for environ in ({}, {"JWT_SECRET": ""}):
            with self.subTest(environ=environ):
                with self.assertRaises(ValueError) as ctx:
                    Settings.from_env(environ)
                self.assertIn("JWT_SECRET", str(ctx.exception))

    def test_unknown_backend_fails(self):
        with self.assertRaises(ValueError) as ctx:
            Settings.from_env({"JWT_SECRET": "s", "STORAGE_BACKEND": "oracle"})
        self.assertIn("oracle", str(ctx.exception))

    def test_backend_name_is_normalised(self):
        settings = Settings.from_env({
            "JWT_SECRET": "s",
            "STORAGE_BACKEND": " SQLite ",
            "DATABASE_URL": "sqlite:///auth.db",
        })
        self.assertEqual(settings.storage_backend, "sqlite")

    def test_sql_backends_require_database_url(self):
        for backend in ("postgres", "mysql", "sqlite"):
            with self.subTest(backend=backend):
                with self.assertRaises(ValueError) as ctx:
                    Settings.from_env({"JWT_SECRET": "s", "STORAGE_BACKEND": backend})
                self.assertIn("DATABASE_URL", str(ctx.exception))

    def test_mongodb_requires_uri(self):
        with self.assertRaises(ValueError) as ctx:
            Settings.from_env({"JWT_SECRET": "s", "STORAGE_BACKEND": "mongodb"})
        self.assertIn("MONGODB_URI", str(ctx.exception))

    def test_mongodb_settings(self):
        settings = Settings.from_env({
            "JWT_SECRET": "s",
            "STORAGE_BACKEND": "mongodb",
            "MONGODB_URI": "mongodb://localhost:27017",
            "MONGODB_DATABASE": "users_db",
        })
        self.assertEqual(settings.mongodb_uri, "mongodb://localhost:27017")
        self.assertEqual(settings.mongodb_database, "users_db")

    def test_repr_hides_secret(self):
        settings = Settings.from_env({"JWT_SECRET": "do-not-print"})
        self.assertNotIn("do-not-print", repr(settings))

    @patch('api.config.load_dotenv')
    def test_load_settings_reads_process_env(self, mock_load_dotenv):
        with patch.dict('os.environ', {"JWT_SECRET": "from-env", "PORT": "8080"}, clear=True):
            settings = load_settings()

        mock_load_dotenv.assert_called_once()
        self.assertEqual(settings.jwt_secret, "from-env")
        self.assertEqual(settings.port, 8080)


if __name__ == '__main__':
    unittest.main()
