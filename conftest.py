# makes the cnifuzz package importable for the tests in test/ without installing
