"""Tests for subnets and address pools."""

from keagen.subnet import Pool, SubnetConfig, Subnet4


def test_subnet_ids_start_at_one_and_increase():
    """Test that subnet ids are sequential from 1."""
    subnets = Subnet4()

    ids = [subnets.add_subnet(f"10.0.{i}.0/24") for i in range(5)]

    assert ids == [1, 2, 3, 4, 5]
    assert subnets.next_id == 6


def test_same_cidr_gets_new_id():
    """Test that adding the same CIDR twice creates two subnets."""
    subnets = Subnet4()

    assert subnets.add_subnet("10.0.0.0/8") == 1
    assert subnets.add_subnet("10.0.0.0/8") == 2
    assert len(subnets) == 2


def test_add_pool():
    """Test attaching a pool to a subnet."""
    subnets = Subnet4()
    subnet_id = subnets.add_subnet("192.168.1.0/24")

    assert subnets.add_pool(subnet_id, "192.168.1.100", "192.168.1.200")

    cfg = subnets.get(subnet_id)
    assert cfg is not None
    assert list(cfg.pools) == ["192.168.1.100 - 192.168.1.200"]


def test_add_pool_unknown_subnet():
    """Test that an unknown subnet id is reported and changes nothing."""
    subnets = Subnet4()
    subnet_id = subnets.add_subnet("192.168.1.0/24")
    subnets.add_pool(subnet_id, "192.168.1.10", "192.168.1.20")
    before = subnets.render()

    assert subnets.add_pool(99, "192.168.1.30", "192.168.1.40") is False
    assert subnets.add_pool(0, "192.168.1.30", "192.168.1.40") is False

    assert subnets.render() == before
    assert subnets.next_id == 2


def test_duplicate_pool_collapses():
    """Test that the same range added twice is stored once."""
    subnets = Subnet4()
    subnet_id = subnets.add_subnet("192.168.1.0/24")
    subnets.add_pool(subnet_id, "192.168.1.10", "192.168.1.20")
    subnets.add_pool(subnet_id, "192.168.1.10", "192.168.1.20")

    cfg = subnets.get(subnet_id)
    assert cfg is not None
    assert len(cfg.pools) == 1


def test_pools_sorted_as_strings():
    """Test that pools are ordered by their range text, not numerically."""
    subnets = Subnet4()
    subnet_id = subnets.add_subnet("10.0.0.0/8")
    subnets.add_pool(subnet_id, "100", "200")
    subnets.add_pool(subnet_id, "50", "60")

    rendered = subnets.render()
    assert rendered[0]["pools"] == [{"pool": "100 - 200"}, {"pool": "50 - 60"}]


def test_pool_range_format():
    """Test the pool range string."""
    pool = Pool.from_bounds("192.168.1.100", "192.168.1.200")

    assert pool.range == "192.168.1.100 - 192.168.1.200"
    assert pool.render() == {"pool": "192.168.1.100 - 192.168.1.200"}


def test_subnet_render():
    """Test rendering the subnet registry."""
    subnets = Subnet4()
    first = subnets.add_subnet("192.168.1.0/24")
    second = subnets.add_subnet("10.0.0.0/8")
    subnets.add_pool(first, "192.168.1.10", "192.168.1.20")

    assert subnets.render() == [
        {"id": first, "subnet": "192.168.1.0/24", "pools": [{"pool": "192.168.1.10 - 192.168.1.20"}]},
        {"id": second, "subnet": "10.0.0.0/8", "pools": []},
    ]


def test_subnet_registry_empty():
    """Test an empty registry."""
    subnets = Subnet4()

    assert subnets.is_empty()
    assert subnets.render() == []
    subnets.add_subnet("10.0.0.0/8")
    assert not subnets.is_empty()


def test_ids_continue_after_existing_subnets():
    """Test that a registry built with subnets does not hand out their ids again."""
    subnets = Subnet4(configs={1: SubnetConfig(id=1, subnet="10.0.0.0/8")})

    assert subnets.next_id == 2
    assert subnets.add_subnet("192.168.1.0/24") == 2
    assert subnets.get(1).subnet == "10.0.0.0/8"


def test_ids_continue_after_dump_and_validate():
    """Test that a dumped and re-validated registry keeps its subnets."""
    original = Subnet4()
    subnet_id = original.add_subnet("10.0.0.0/8")
    original.add_pool(subnet_id, "10.0.0.10", "10.0.0.20")

    restored = Subnet4.model_validate(original.model_dump())
    new_id = restored.add_subnet("192.168.1.0/24")

    assert new_id == 2
    assert restored.render()[0] == {
        "id": 1,
        "subnet": "10.0.0.0/8",
        "pools": [{"pool": "10.0.0.10 - 10.0.0.20"}],
    }
