# kubitect

`kubitect` keeps track of Kubernetes cluster directories and decides which
changes to a cluster's configuration are allowed. It provides:

- `kubitect.context`: an application context that knows where clusters live,
  a global home directory (`~/.kubitect`) or, for local deployments,
  `./.kubitect` in the working directory;
- `kubitect.meta`: cluster metadata that gives the standard paths inside a
  cluster directory (applied configuration, infrastructure file, Terraform
  state, kubeconfig, SSH key, cache);
- `kubitect.meta_clusters`: discovery of cluster directories;
- `kubitect.rules`: a small rule-path language and the `Rule` type;
- `kubitect.events`: a comparison-tree node type and the matching of its
  changes against rules, producing events;
- `kubitect.rule_list` and `kubitect.apply_action`: the built-in rule sets of
  the `create`, `scale` and `upgrade` apply actions;
- `kubitect.env` and `kubitect.cli_text`: project constants and help-text
  helpers.

It has no third-party runtime dependencies. Install it with your usual Python
package installer; `pip install kubitect[test]` also brings in pytest.

## Application context

```python
from kubitect.context import AppContextOptions

ctx = AppContextOptions(local=False).app_context()
print(ctx.clusters_dir())        # <home>/.kubitect/clusters
print(ctx.local_clusters_dir())  # <cwd>/.kubitect/clusters
print(ctx.share_dir())           # <home>/.kubitect/share

ctx.verify_requirements()        # RuntimeError if virtualenv, python3 or git is not on PATH
```

With `local=True` the home directory is `.kubitect` in the working directory.
`app_context()` builds the context once and returns the same object after that.

## Clusters

`all_clusters` lists every directory in the global clusters directory and,
when it is a different directory, in the local one. It raises `OSError` if the
global clusters directory cannot be read; an unreadable local directory is
skipped.

```python
from kubitect.meta_clusters import all_clusters

clusters = all_clusters(ctx)
print(clusters.names())
print(clusters.count_by_name("lake"))

cluster = clusters.find_by_name("lake")   # None if there is no such cluster
if cluster is not None and cluster.contains_kubeconfig():
    print(cluster.kubeconfig_path())      # <cluster>/config/admin.conf
```

A `ClusterMeta` also gives `config_dir()`, `applied_config_path()`,
`infrastructure_config_path()`, `tf_state_path()`, `private_ssh_key_path()`
and `cache_dir()` (`<clusters dir>/../cache/<name>`), with
`contains_applied_config()` and `contains_tf_state_config()` to test for
files.

## Rule paths

A rule path is a dot-separated pattern matched against change paths:

| Syntax        | Meaning                                                    |
|---------------|------------------------------------------------------------|
| `a.b`         | segments must be equal                                     |
| `*`           | any segment                                                |
| `{a, b}`      | any of the listed options                                  |
| `@`, `@{a,b}` | anchor: the event reports the change at this segment       |
| `a.b!`        | exact: the change path must not be longer than the pattern |

Spaces are removed from a rule path when it is created. A rule path that is
longer than the change path never matches; a shorter one matches its prefix.

```python
from kubitect.rules import RulePath

path = RulePath("cluster.nodes.{master, worker}.instances.@")
path.validate()   # raises RuleValidationError if malformed
print(path.matches("cluster.nodes.worker.instances.w1.ip"))           # True
print(path.find_anchor_path("cluster.nodes.worker.instances.w1.ip"))  # cluster.nodes.worker.instances.w1
```

Rule types are integers: `ALLOW` (0), `WARN` (100), `ERROR` (200) and
`IGNORE` (255). `normalize_rule_type` maps any value to the nearest of these at
or below it, and `rule_type_name` gives its name.

## Events

Build a comparison tree from `DiffNode` objects; a node's path is made of the
keys above it. `generate_events` validates the rules and then matches every
changed leaf against them. When several rules match, the one with the longer
path wins, then the one with fewer wildcards, then the higher rule type.
Changes matched by an anchored rule are reported at the anchor's node and
grouped into one event.

```python
from kubitect.apply_action import to_apply_action
from kubitect.events import DiffNode, generate_events
from kubitect.rules import ERROR, ChangeType

tree = DiffNode(children=[
    DiffNode("kubernetes", children=[
        DiffNode("version", ChangeType.MODIFY, "v1.30.3", "v1.30.4"),
    ]),
])

events = generate_events(tree, to_apply_action("upgrade").rules())
print(events[0])   # (Allow) Change: [Type: modify, Path: kubernetes.version]
print(events.filter_by_rule_type(ERROR))   # []
```

`to_apply_action` accepts `create`, `upgrade` and `scale`; an empty string
means `create`, and any other name raises `ValueError`.

## Other helpers

- `kubitect.env.os_preset("ubuntu22")` returns the cloud image and network
  interface of an OS preset, and raises `ValueError` for an unknown name.
- `long_desc`, `example` and `preset_name` in `kubitect.cli_text` format help
  text and turn a preset path such as `presets/minimal.yaml` into `minimal`.

## What this package does not do

It has no command-line program. It does not read or write cluster
configuration files, does not compare two configurations itself (the caller
builds the `DiffNode` tree), and does not provision virtual machines, run
Terraform or Ansible, generate SSH keys, or create, scale, upgrade or destroy
clusters. It decides which changes are permitted and where a cluster's files
are; acting on that is left to the caller.