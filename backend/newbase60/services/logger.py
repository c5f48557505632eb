import logging

app_logger = logging.getLogger("newbase60")

# Prevent duplicate logs if this module gets imported multiple times
if not app_logger.handlers:
  # Console handler
  console_handler = logging.StreamHandler()

  # Formatter
  formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
  console_handler.setFormatter(formatter)

  app_logger.addHandler(console_handler)

# A library shouldn't push its records into the host application's root logger
app_logger.propagate = False
