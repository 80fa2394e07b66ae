"""AI-Powered Accessibility Checker API."""
