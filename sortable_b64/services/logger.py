import logging

app_logger = logging.getLogger("sortable-base64")

# Only attach the console handler once, the module can be imported from several places
if not app_logger.handlers:
  console_handler = logging.StreamHandler()

  # The level lives on the logger itself so config.py can change it after loading settings
  console_handler.setLevel(logging.NOTSET)

  formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
  console_handler.setFormatter(formatter)

  app_logger.addHandler(console_handler)

app_logger.setLevel(logging.INFO)

# Library logs shouldn't leak into whatever the host application configured on the root logger
app_logger.propagate = False
