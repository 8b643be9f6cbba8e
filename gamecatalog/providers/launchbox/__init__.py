"""LaunchBox library provider."""
