from olakedrivers.mongo_config import MongoConfig


def test_basic_uri():
    cfg = MongoConfig(hosts=["localhost:27017"], authdb="admin")
    assert cfg.uri() == "mongodb://localhost:27017/?authSource=admin"


def test_srv_prefix():
    cfg = MongoConfig(hosts=["db.example.com"], srv=True)
    assert cfg.uri().startswith("mongodb+srv://")


def test_default_max_threads_set_by_uri():
    cfg = MongoConfig(hosts=["localhost"])
    cfg.uri()
    assert cfg.max_threads == 10


def test_explicit_max_threads_kept():
    cfg = MongoConfig(hosts=["localhost"], max_threads=4)
    cfg.uri()
    assert cfg.max_threads == 4


def test_replica_set_default_read_preference():
    cfg = MongoConfig(hosts=["localhost"], authdb="admin", replica_set="rs0")
    uri = cfg.uri()
    assert cfg.read_preference == "secondaryPreferred"
    assert uri.endswith("&replicaSet=rs0&readPreference=secondaryPreferred")


def test_replica_set_custom_read_preference():
    cfg = MongoConfig(hosts=["localhost"], replica_set="rs0", read_preference="primary")
    assert cfg.uri().endswith("&readPreference=primary")


def test_username_and_password():
    password = "password"
    cfg = MongoConfig(hosts=["localhost"], username="user", password=password)
    assert "://user:password@localhost/" in cfg.uri()


def test_username_only():
    cfg = MongoConfig(hosts=["localhost"], username="user")
    uri = cfg.uri()
    assert "://user@localhost/" in uri
    assert "user:" not in uri


def test_multiple_hosts_joined():
    cfg = MongoConfig(hosts=["a.example.com", "b.example.com"])
    assert "://a.example.com,b.example.com/" in cfg.uri()


def test_negative_retry_count_defaults():
    cfg = MongoConfig(retry_count=-1)
    assert cfg.normalize_retry_count() == 3
    assert cfg.retry_count == 3


def test_zero_retry_count_gives_one_attempt():
    cfg = MongoConfig(retry_count=0)
    assert cfg.normalize_retry_count() == 1